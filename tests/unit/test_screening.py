"""
Unit tests for content screening: markup stripping, blocked terms,
spam scoring, text signals and the auto-moderation decision.
"""
import pytest
from jsonschema import validate

from comment_guard.config.schemas import CONTENT_ANALYSIS_SCHEMA
from comment_guard.screening.analyzer import analyze_content, decide_moderation
from comment_guard.screening.markup import strip_markup
from comment_guard.screening.signals import (
    analyze_complexity,
    analyze_sentiment,
    extract_problematic_elements,
)
from comment_guard.screening.spam_scorer import SpamScorer, author_info_from_request
from comment_guard.screening.terms import find_blocked_terms, mask_blocked_terms


class TestStripMarkup:
    def test_keeps_text_drops_tags(self):
        assert strip_markup("<p>Hello <b>world</b></p>") == "Hello world"

    def test_drops_script_and_style_bodies(self):
        assert strip_markup("a<script>alert(1)</script>b<style>p{}</style>c") == "abc"

    def test_drops_comments(self):
        assert strip_markup("x<!-- hidden -->y") == "xy"

    def test_escapes_decoded_entities(self):
        assert strip_markup("1 &lt; 2 &amp; 3") == "1 &lt; 2 &amp; 3"

    def test_collapses_whitespace(self):
        assert strip_markup("  many\n\n  lines\tand   spaces ") == "many lines and spaces"

    def test_quotes_left_unescaped(self):
        assert strip_markup('<i>say "hi"</i>') == 'say "hi"'

    @pytest.mark.parametrize("value", [None, "", 5])
    def test_empty_or_non_string(self, value):
        assert strip_markup(value) == ""


class TestBlockedTerms:
    def test_whole_word_case_insensitive(self):
        assert find_blocked_terms("What a SCAM, total Fake", ["scam", "fake"]) == ["scam", "fake"]

    def test_no_partial_words(self):
        assert find_blocked_terms("robots and bottles", ["bot"]) == []

    def test_distinct_hits(self):
        assert find_blocked_terms("spam spam spam", ["spam"]) == ["spam"]

    def test_mask(self):
        assert mask_blocked_terms("This is a Scam!", ["scam"]) == "This is a ****!"

    def test_empty_list(self):
        assert find_blocked_terms("anything", []) == []
        assert mask_blocked_terms("anything", []) == "anything"


class TestSpamScorer:
    @pytest.fixture
    def scorer(self):
        return SpamScorer()

    def test_clean_comment_low_score(self, scorer, clean_comment):
        verdict = scorer.detect(clean_comment, threshold=15)
        assert verdict.is_spam is False
        assert verdict.score < 15

    def test_spam_comment_flagged(self, scorer, spam_comment):
        verdict = scorer.detect(spam_comment, threshold=15)
        assert verdict.is_spam is True
        assert verdict.score >= 30  # two URLs alone score 30

    def test_score_capped(self, scorer):
        content = " ".join(f"http://spam{i}.example" for i in range(20))
        assert scorer.score(content) == 100

    def test_empty_content(self, scorer):
        assert scorer.score("") == 0

    def test_very_short_content_penalised(self, scorer):
        assert scorer.score("hey") == 5

    def test_excessive_caps_counted_once(self, scorer):
        assert scorer.score("ABCDEFGHIJKL and MNOPQRSTUVWX") == 6

    def test_author_history(self, scorer):
        text = "A perfectly ordinary remark."
        base = scorer.score(text)
        assert scorer.score(text, {"is_new_user": True}) == base + 5
        assert scorer.score(text, {"has_history": True, "spam_history": True}) == base + 10

    def test_custom_weights(self):
        weights = dict(SpamScorer().weights, urls=1)
        assert SpamScorer(weights).score("see http://a.io and more text here") == 1

    def test_author_info_from_request(self):
        assert author_info_from_request({"isNewUser": True}) == {
            "is_new_user": True,
            "has_history": False,
            "spam_history": False,
        }
        assert author_info_from_request(None) == {}


class TestSignals:
    def test_extracts_elements(self):
        text = "Mail me@x.io or call 555-123-4567, see http://a.io and http://a.io then. Buy now, FREE!"
        elements = extract_problematic_elements(text)
        assert elements["urls"] == ["http://a.io"]
        assert elements["emails"] == ["me@x.io"]
        assert elements["phone_numbers"] == ["555-123-4567"]
        assert elements["suspicious_keywords"] == ["buy", "free"]

    def test_empty_elements(self):
        assert extract_problematic_elements("") == {
            "urls": [],
            "emails": [],
            "phone_numbers": [],
            "suspicious_keywords": [],
        }

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("I love this, great post", "positive"),
            ("terrible and awful take", "negative"),
            ("good but bad", "neutral"),
            ("", "neutral"),
        ],
    )
    def test_sentiment(self, text, expected):
        assert analyze_sentiment(text) == expected

    def test_complexity_metrics(self):
        report = analyze_complexity("One two three. Four five six!")
        metrics = report["metrics"]
        assert metrics["word_count"] == 6
        assert metrics["sentence_count"] == 2
        assert metrics["avg_sentence_length"] == 3.0
        assert metrics["vocabulary_richness"] == 1.0
        assert 0 <= report["score"] <= 100

    def test_complexity_empty(self):
        assert analyze_complexity("") == {"score": 0, "metrics": {}}


class TestAnalyzeContent:
    def test_clean_comment(self, clean_comment):
        analysis = analyze_content(clean_comment, blocked_terms=["scam"])
        assert analysis.sanitized == clean_comment
        assert analysis.flags.is_spam is False
        assert analysis.flags.has_blocked_terms is False
        assert analysis.blocked_terms.masked is None
        assert analysis.sentiment == "positive"
        assert decide_moderation(analysis) == "approved"

    def test_spam_comment(self, spam_comment):
        analysis = analyze_content("Buy cheap pills at http://x.io NOW!!!!!!")
        assert analysis.flags.is_spam is True
        assert analysis.flags.contains_urls is True
        assert analysis.flags.is_suspicious is True
        assert decide_moderation(analysis) == "pending"

    def test_markup_stripped_before_screening(self):
        analysis = analyze_content("<b>hello</b> <script>buy()</script>there friend")
        assert analysis.sanitized == "hello there friend"
        assert analysis.meta.original_length > analysis.meta.sanitized_length

    def test_non_string_content(self):
        analysis = analyze_content(None)
        assert analysis.sanitized == ""
        assert analysis.flags.is_short is True

    def test_repeated_content_flag(self):
        analysis = analyze_content("this is repeated this is repeated")
        assert analysis.flags.has_repeated_content is True

    def test_dump_matches_schema(self, spam_comment):
        validate(instance=analyze_content(spam_comment).model_dump(), schema=CONTENT_ANALYSIS_SCHEMA)

    def test_empty_dump_matches_schema(self):
        validate(instance=analyze_content("").model_dump(), schema=CONTENT_ANALYSIS_SCHEMA)


class TestDecideModeration:
    def test_blocked_and_spam_rejected(self, spam_comment):
        analysis = analyze_content(spam_comment + " total scam", blocked_terms=["scam"])
        assert decide_moderation(analysis) == "rejected"

    def test_blocked_terms_low_trust_rejected(self):
        analysis = analyze_content("This thread is fake news, honestly.", blocked_terms=["fake"])
        assert decide_moderation(analysis, trust_level="low") == "rejected"
        assert decide_moderation(analysis) == "pending"

    def test_trusted_clean_approved(self):
        analysis = analyze_content("Our mortgage rates went up again this year.")
        assert analysis.flags.is_suspicious is True
        assert decide_moderation(analysis, trust_level="trusted") == "approved"
        assert decide_moderation(analysis) == "pending"

    def test_review_requested(self, clean_comment):
        analysis = analyze_content(clean_comment, blocked_terms=[])
        assert decide_moderation(analysis, flag_for_review=True) == "pending"
