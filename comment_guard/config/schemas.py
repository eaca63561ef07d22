"""
JSON Schemas for the payloads this package hands back to the HTTP layer.

Three schemas:
1. VALIDATION_RESULT_SCHEMA — ValidationResult.to_dict()
2. ERROR_RESPONSE_SCHEMA    — body of the 400 response built by the gate
3. CONTENT_ANALYSIS_SCHEMA  — ContentAnalysis.model_dump()
"""

_STRING_LIST: dict = {"type": "array", "items": {"type": "string"}}

# =============================================================================
# 1. Validation result
# =============================================================================
VALIDATION_RESULT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["is_valid", "errors", "sanitized"],
    "properties": {
        "is_valid": {"type": "boolean"},
        "errors": _STRING_LIST,
        "sanitized": {},
    },
    # is_valid must agree with the error list
    "oneOf": [
        {
            "properties": {"is_valid": {"const": True}, "errors": {"maxItems": 0}},
        },
        {
            "properties": {"is_valid": {"const": False}, "errors": {"minItems": 1}},
        },
    ],
}

# =============================================================================
# 2. HTTP 400 body
# =============================================================================
ERROR_RESPONSE_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["error", "code", "errors"],
    "properties": {
        "error": {"type": "string"},
        "code": {"type": "string", "enum": ["VALIDATION_ERROR"]},
        "errors": {**_STRING_LIST, "minItems": 1},
        "validator": {"type": "string"},
    },
}

# =============================================================================
# 3. Content analysis
# =============================================================================
CONTENT_ANALYSIS_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": [
        "sanitized",
        "blocked_terms",
        "spam",
        "elements",
        "sentiment",
        "complexity",
        "flags",
        "meta",
    ],
    "properties": {
        "sanitized": {"type": "string"},
        "blocked_terms": {
            "type": "object",
            "additionalProperties": False,
            "required": ["detected", "terms", "masked"],
            "properties": {
                "detected": {"type": "boolean"},
                "terms": _STRING_LIST,
                "masked": {"type": ["string", "null"]},
            },
        },
        "spam": {
            "type": "object",
            "additionalProperties": False,
            "required": ["is_spam", "score", "threshold"],
            "properties": {
                "is_spam": {"type": "boolean"},
                "score": {"type": "integer", "minimum": 0, "maximum": 100},
                "threshold": {"type": "integer", "minimum": 0},
            },
        },
        "elements": {
            "type": "object",
            "additionalProperties": False,
            "required": ["urls", "emails", "phone_numbers", "suspicious_keywords"],
            "properties": {
                "urls": _STRING_LIST,
                "emails": _STRING_LIST,
                "phone_numbers": _STRING_LIST,
                "suspicious_keywords": _STRING_LIST,
            },
        },
        "sentiment": {"type": "string", "enum": ["positive", "negative", "neutral"]},
        "complexity": {
            "type": "object",
            "additionalProperties": False,
            "required": ["score", "metrics"],
            "properties": {
                "score": {"type": "integer", "minimum": 0, "maximum": 100},
                "metrics": {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {
                        "word_count": {"type": "integer", "minimum": 0},
                        "sentence_count": {"type": "integer", "minimum": 0},
                        "avg_word_length": {"type": "number", "minimum": 0},
                        "avg_sentence_length": {"type": "number", "minimum": 0},
                        "vocabulary_richness": {"type": "number", "minimum": 0, "maximum": 1},
                        "unique_word_count": {"type": "integer", "minimum": 0},
                    },
                },
            },
        },
        "flags": {
            "type": "object",
            "additionalProperties": {"type": "boolean"},
        },
        "meta": {
            "type": "object",
            "additionalProperties": False,
            "required": ["original_length", "sanitized_length", "processing_ms"],
            "properties": {
                "original_length": {"type": "integer", "minimum": 0},
                "sanitized_length": {"type": "integer", "minimum": 0},
                "processing_ms": {"type": "integer", "minimum": 0},
            },
        },
    },
}
