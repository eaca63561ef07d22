"""
Typed Pydantic models for the content screening report.

Outward contract of screening.analyzer.analyze_content(); see
CONTENT_ANALYSIS_SCHEMA for the JSON shape of ``model_dump()``.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class BlockedTermsReport(BaseModel):
    """Blocked-term hits on the stripped text, plus a masked copy when any hit."""

    detected: bool = False
    terms: List[str] = Field(default_factory=list)
    masked: Optional[str] = Field(None, description="Text with each hit replaced by '*'; None when clean.")


class SpamReport(BaseModel):
    is_spam: bool
    score: int = Field(..., ge=0, le=100)
    threshold: int = Field(..., ge=0)


class ProblematicElements(BaseModel):
    urls: List[str] = Field(default_factory=list)
    emails: List[str] = Field(default_factory=list)
    phone_numbers: List[str] = Field(default_factory=list)
    suspicious_keywords: List[str] = Field(default_factory=list)


class ComplexityMetrics(BaseModel):
    word_count: int = 0
    sentence_count: int = 0
    avg_word_length: float = 0.0
    avg_sentence_length: float = 0.0
    vocabulary_richness: float = 0.0
    unique_word_count: int = 0


class ComplexityReport(BaseModel):
    score: int = Field(0, ge=0, le=100)
    metrics: ComplexityMetrics = Field(default_factory=ComplexityMetrics)


class ContentFlags(BaseModel):
    has_blocked_terms: bool = False
    is_spam: bool = False
    is_suspicious: bool = False
    contains_urls: bool = False
    contains_emails: bool = False
    contains_phones: bool = False
    has_repeated_content: bool = False
    is_short: bool = False
    is_long: bool = False


class AnalysisMeta(BaseModel):
    original_length: int = Field(0, ge=0)
    sanitized_length: int = Field(0, ge=0)
    processing_ms: int = Field(0, ge=0)


class ContentAnalysis(BaseModel):
    """Full screening report for one comment body."""

    sanitized: str
    blocked_terms: BlockedTermsReport
    spam: SpamReport
    elements: ProblematicElements
    sentiment: Literal["positive", "negative", "neutral"]
    complexity: ComplexityReport
    flags: ContentFlags
    meta: AnalysisMeta
