"""Static educational content about protein quality."""

from dataclasses import dataclass
from enum import StrEnum


class EducationTopic(StrEnum):
    """Topics of the educational content."""

    OVERVIEW = "overview"
    DIAAS = "diaas"
    PDCAAS = "pdcaas"
    PROTEIN_SOURCES = "protein_sources"
    PRACTICAL_TIPS = "practical_tips"

    @property
    def display_name(self) -> str:
        """Title shown for the topic."""
        return _TOPIC_DISPLAY[self]


_TOPIC_DISPLAY = {
    EducationTopic.OVERVIEW: "Overview",
    EducationTopic.DIAAS: "DIAAS Score",
    EducationTopic.PDCAAS: "PDCAAS Score",
    EducationTopic.PROTEIN_SOURCES: "Protein Sources",
    EducationTopic.PRACTICAL_TIPS: "Practical Tips",
}


@dataclass(frozen=True)
class EducationSection:
    """A titled block of educational text."""

    title: str
    paragraphs: tuple[str, ...]


EDUCATION_CONTENT: dict[EducationTopic, tuple[EducationSection, ...]] = {
    EducationTopic.OVERVIEW: (
        EducationSection(
            "What is Protein Quality?",
            (
                "Not all protein is equal. Protein quality describes how well a "
                "protein supplies the essential amino acids your body needs, and "
                "how much of it you actually digest.",
                "A label that says 20 g of protein does not tell you how much of "
                "that protein your body can use for building and repairing "
                "tissue.",
            ),
        ),
        EducationSection(
            "Why Does This Matter?",
            (
                "Two foods with the same grams of protein can differ widely in "
                "usable protein. Knowing the quality helps you plan meals that "
                "actually meet your needs.",
            ),
        ),
        EducationSection(
            "How to Use This App",
            (
                "Enter the protein grams from the nutrition label, optionally the "
                "% Daily Value, and pick one or more protein sources.",
                "The calculator multiplies the protein amount by the source's "
                "quality score to estimate quality-adjusted protein.",
            ),
        ),
    ),
    EducationTopic.DIAAS: (
        EducationSection(
            "What is DIAAS?",
            (
                "The Digestible Indispensable Amino Acid Score measures protein "
                "quality from the digestibility of each essential amino acid at "
                "the end of the small intestine.",
            ),
        ),
        EducationSection(
            "DIAAS Score Interpretation",
            (
                "100% or more: excellent quality, complete protein.",
                "75% to 99%: high quality protein.",
                "Below 75%: no quality claim can be made.",
            ),
        ),
        EducationSection(
            "Advantages of DIAAS",
            (
                "DIAAS is not capped at 100%, so it can distinguish between "
                "excellent proteins, and it scores each amino acid separately.",
            ),
        ),
    ),
    EducationTopic.PDCAAS: (
        EducationSection(
            "What is PDCAAS?",
            (
                "The Protein Digestibility Corrected Amino Acid Score is the older "
                "standard, based on total fecal protein digestibility and the "
                "most limiting amino acid.",
            ),
        ),
        EducationSection(
            "PDCAAS Limitations",
            (
                "Scores are truncated at 1.0, so high quality proteins look "
                "identical, and fecal digestibility overestimates what is "
                "absorbed.",
            ),
        ),
        EducationSection(
            "When We Use PDCAAS",
            (
                "DIAAS is preferred whenever it is available. PDCAAS is used only "
                "for sources without a published DIAAS value.",
            ),
        ),
    ),
    EducationTopic.PROTEIN_SOURCES: (
        EducationSection(
            "Animal vs. Plant Proteins",
            (
                "Animal proteins are usually complete and highly digestible.",
                "Plant proteins are often limited in one or more amino acids, but "
                "combining them can produce a complete profile.",
            ),
        ),
        EducationSection(
            "Combining Plant Proteins",
            (
                "Legumes are low in methionine and grains are low in lysine; "
                "eating them together, like rice and beans, balances the two.",
            ),
        ),
    ),
    EducationTopic.PRACTICAL_TIPS: (
        EducationSection(
            "Reading Nutrition Labels",
            (
                "Look for the %DV of protein, which US labels base on protein "
                "quality. Be wary of products that list protein grams without a "
                "%DV.",
            ),
        ),
        EducationSection(
            "Daily Protein Needs",
            (
                "The FDA Daily Value for protein is 50 g. Active adults often "
                "need 1.2 to 2.0 g per kg of body weight.",
            ),
        ),
        EducationSection(
            "Meal Planning Tips",
            (
                "Spread protein across meals and include a high quality source "
                "in each when possible.",
            ),
        ),
        EducationSection(
            "Common Mistakes",
            (
                "Counting all protein grams as equal, and relying on a single "
                "plant source without complementary proteins.",
            ),
        ),
    ),
}


def get_topic(topic: EducationTopic) -> tuple[EducationSection, ...]:
    """Return the sections of a topic."""
    return EDUCATION_CONTENT[topic]
