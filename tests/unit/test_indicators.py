import dataclasses

import pytest

from resume_detector.scoring.indicators import (
    AI_INDICATORS,
    HUMAN_INDICATORS,
    IndicatorSet,
    PatternGroup,
    PhraseGroup,
)


def _group(indicators: IndicatorSet, name: str) -> PhraseGroup | PatternGroup:
    groups = (*indicators.phrases, *indicators.patterns)
    return next(g for g in groups if g.name == name)


class TestIndicatorTables:
    @pytest.mark.parametrize(
        ("indicators", "name", "weight", "size"),
        [
            (AI_INDICATORS, "phrases", 2.0, 30),
            (AI_INDICATORS, "formal", 1.5, 10),
            (AI_INDICATORS, "repetitive", 1.0, 3),
            (HUMAN_INDICATORS, "personal_details", 3.0, 10),
            (HUMAN_INDICATORS, "technical_skills", 2.0, 3),
            (HUMAN_INDICATORS, "casual_language", 1.5, 8),
        ],
    )
    def test_group_weights_and_sizes(
        self, indicators: IndicatorSet, name: str, weight: float, size: int
    ) -> None:
        group = _group(indicators, name)
        assert group.weight == weight
        entries = group.phrases if isinstance(group, PhraseGroup) else group.patterns
        assert len(entries) == size

    def test_tables_are_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            AI_INDICATORS.phrases = ()  # type: ignore[misc]
        assert isinstance(HUMAN_INDICATORS.patterns, tuple)

    def test_phrases_are_lower_case(self) -> None:
        group = _group(AI_INDICATORS, "phrases")
        assert isinstance(group, PhraseGroup)
        for phrase in group.phrases:
            assert phrase == phrase.lower()


class TestGroupScoring:
    def test_pattern_group_counts_every_match(self) -> None:
        group = _group(HUMAN_INDICATORS, "casual_language")
        assert group.score("I love Go. I enjoy Rust. i love tests.") == 4.5

    def test_phrase_group_uses_text_as_given(self) -> None:
        group = PhraseGroup(name="t", weight=2.0, phrases=("team player",))
        assert group.score("team player") == 2.0
        assert group.score("TEAM PLAYER") == 0

    def test_indicator_set_sums_all_groups(self) -> None:
        text = "I am passionate about synergy and growth"
        total = AI_INDICATORS.score(text, text.lower())
        # two phrases, one formal pattern, two repetitive patterns
        assert total == 2.0 + 2.0 + 1.5 + 1.0 + 1.0

    def test_pattern_group_with_no_patterns_scores_zero(self) -> None:
        assert PatternGroup(name="empty", weight=9.0, patterns=()).score("anything") == 0
