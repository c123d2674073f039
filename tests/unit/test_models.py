"""
Unit tests for result models and their serialised shape.
"""

import pytest
from laterlens.extractor.models import (
    CandidateSource,
    ContentCandidate,
    ExtractionMetadata,
    ExtractionResult,
    FallbackResult,
    StructureStats,
    ValidationResult,
)


@pytest.fixture
def metadata():
    return ExtractionMetadata(
        original_length=1200,
        processed_length=900,
        language="en",
        structure=StructureStats(heading_count=2, paragraph_count=5, has_hierarchy=True, total_words=150),
        quality=1.0,
        extracted_at=1700000000000,
        source="semantic",
        confidence=0.9,
    )


class TestExtractionResult:
    def test_success_requires_content(self, metadata):
        with pytest.raises(ValueError):
            ExtractionResult(success=True, metadata=metadata)

    def test_failure_requires_fallback(self):
        with pytest.raises(ValueError):
            ExtractionResult(success=False, error="boom")

    def test_success_to_dict(self, metadata):
        result = ExtractionResult.succeeded("text", metadata)

        data = result.to_dict()

        assert data["success"] is True
        assert data["content"] == "text"
        assert data["metadata"]["originalLength"] == 1200
        assert data["metadata"]["extractedAt"] == 1700000000000
        assert data["metadata"]["structure"]["paragraphCount"] == 5
        assert data["metadata"]["structure"]["hasHierarchy"] is True
        assert result.quality == 1.0
        assert result.source == "semantic"

    def test_failure_accessors(self):
        result = ExtractionResult.failed("No content", FallbackResult("Title", "fallback-meta", 0.1))

        assert result.summary_input == "Title"
        assert result.quality == 0.1
        assert result.source == "fallback-meta"
        assert result.content is None


class TestValueChecks:
    def test_candidate_confidence_range(self):
        with pytest.raises(ValueError):
            ContentCandidate(None, 10.0, CandidateSource.SCORING, 1.5)

    def test_validation_quality_floor(self):
        with pytest.raises(ValueError):
            ValidationResult(True, (), (), 0.05)

    def test_candidate_source_values(self):
        assert [s.value for s in CandidateSource] == ["semantic", "scoring", "density", "structure"]
