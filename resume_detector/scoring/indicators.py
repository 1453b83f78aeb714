"""Static indicator tables used by the heuristic scorer.

AI indicators push the probability up, human indicators push it down. The
weights and bounds below are uncalibrated and kept as-is so scores stay
reproducible across releases.
"""

import re
from dataclasses import dataclass

# JavaScript-style matching: ASCII \w and \d, case-insensitive
_FLAGS = re.IGNORECASE | re.ASCII


@dataclass(frozen=True)
class PatternGroup:
    """A named set of regex patterns sharing one weight."""

    name: str
    weight: float
    patterns: tuple[re.Pattern[str], ...]

    def score(self, text: str) -> float:
        return sum(len(p.findall(text)) for p in self.patterns) * self.weight


@dataclass(frozen=True)
class PhraseGroup:
    """Literal lower-case phrases counted against lower-cased text."""

    name: str
    weight: float
    phrases: tuple[str, ...]

    def score(self, lowered_text: str) -> float:
        return sum(lowered_text.count(phrase) for phrase in self.phrases) * self.weight


@dataclass(frozen=True)
class IndicatorSet:
    phrases: tuple[PhraseGroup, ...] = ()
    patterns: tuple[PatternGroup, ...] = ()

    def score(self, text: str, lowered_text: str) -> float:
        total = sum(group.score(lowered_text) for group in self.phrases)
        total += sum(group.score(text) for group in self.patterns)
        return total


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, _FLAGS) for p in patterns)


AI_PHRASE_WEIGHT = 2.0
AI_FORMAL_WEIGHT = 1.5
AI_REPETITIVE_WEIGHT = 1.0

HUMAN_PERSONAL_WEIGHT = 3.0
HUMAN_TECHNICAL_WEIGHT = 2.0
HUMAN_CASUAL_WEIGHT = 1.5

AI_INDICATORS = IndicatorSet(
    phrases=(
        PhraseGroup(
            name="phrases",
            weight=AI_PHRASE_WEIGHT,
            phrases=(
                "results-driven professional",
                "proven track record",
                "excellent communication skills",
                "strong analytical skills",
                "detail-oriented",
                "team player",
                "self-motivated",
                "passionate about",
                "leverage my skills",
                "utilize my experience",
                "dynamic professional",
                "innovative solutions",
                "cutting-edge",
                "synergy",
                "paradigm shift",
                "best practices",
                "value-added",
                "core competencies",
                "strategic thinking",
                "cross-functional",
                "thought leadership",
                "game-changing",
                "disruptive innovation",
                "scalable solutions",
                "end-to-end",
                "holistic approach",
                "action-oriented",
                "results-oriented",
                "performance-driven",
                "customer-centric",
            ),
        ),
    ),
    patterns=(
        PatternGroup(
            name="formal",
            weight=AI_FORMAL_WEIGHT,
            patterns=_compile(
                r"I am a \w+ professional with \d+ years of experience",
                r"I have a proven track record of",
                r"I am passionate about",
                r"I am seeking a challenging position",
                r"I am a highly motivated",
                r"I possess strong",
                r"I am committed to",
                r"I am dedicated to",
                r"I am experienced in",
                r"I have extensive experience",
            ),
        ),
        PatternGroup(
            name="repetitive",
            weight=AI_REPETITIVE_WEIGHT,
            patterns=_compile(
                r"I \w+ \w+ \w+ \w+ \w+",
                r"I am \w+ \w+ \w+ \w+",
                r"I can \w+ \w+ \w+ \w+",
            ),
        ),
    ),
)

HUMAN_INDICATORS = IndicatorSet(
    patterns=(
        PatternGroup(
            name="personal_details",
            weight=HUMAN_PERSONAL_WEIGHT,
            patterns=_compile(
                r"I graduated from \w+ University in \d{4}",
                r"I worked at \w+ from \d{4} to \d{4}",
                r"I led a team of \d+ people",
                r"I increased sales by \d+%",
                r"I reduced costs by \$\d+",
                r"I managed a budget of \$\d+",
                r"I completed \d+ projects",
                r"I received the \w+ award",
                r"I was promoted to \w+",
                r"I relocated to \w+",
            ),
        ),
        PatternGroup(
            name="technical_skills",
            weight=HUMAN_TECHNICAL_WEIGHT,
            patterns=_compile(
                r"JavaScript|Python|Java|C\+\+|React|Angular|Vue|Node\.js|SQL|MongoDB"
                r"|AWS|Azure|Docker|Kubernetes",
                r"Photoshop|Illustrator|Figma|Sketch|InDesign",
                r"Excel|PowerBI|Tableau|Salesforce|HubSpot",
            ),
        ),
        PatternGroup(
            name="casual_language",
            weight=HUMAN_CASUAL_WEIGHT,
            patterns=_compile(
                r"I love",
                r"I enjoy",
                r"I'm excited about",
                r"I'm looking forward to",
                r"I've always been",
                r"I started",
                r"I began",
                r"I decided to",
            ),
        ),
    ),
)
