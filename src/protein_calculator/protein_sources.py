"""Bundled protein source reference table."""

from protein_calculator.domain.sources import ProteinCategory, ProteinSource

_MEAT = ProteinCategory.MEAT
_DAIRY = ProteinCategory.DAIRY
_PLANT = ProteinCategory.PLANT
_SUPPLEMENT = ProteinCategory.SUPPLEMENT

PROTEIN_SOURCES: tuple[ProteinSource, ...] = (
    # Animal and high-DIAAS sources
    ProteinSource.named(
        "Whey Protein Isolate",
        _SUPPLEMENT,
        1.25,
        1.0,
        "Complete protein with excellent amino acid profile",
    ),
    ProteinSource.named(
        "Whey Protein Concentrate",
        _SUPPLEMENT,
        1.20,
        1.0,
        "High-quality protein with good bioavailability",
    ),
    ProteinSource.named(
        "Milk (Whole)", _DAIRY, 1.18, 1.0, "Complete protein with casein and whey"
    ),
    ProteinSource.named(
        "Egg (Whole)", _DAIRY, 1.13, 1.0, "Gold standard for protein quality"
    ),
    ProteinSource.named(
        "Beef (Lean)", _MEAT, 1.11, 0.92, "High-quality complete protein"
    ),
    ProteinSource.named(
        "Chicken Breast", _MEAT, 1.08, 0.97, "Lean, complete protein source"
    ),
    ProteinSource.named(
        "Fish (Salmon)", _MEAT, 1.09, 1.0, "Complete protein with omega-3 fatty acids"
    ),
    ProteinSource.named("Pork (Lean)", _MEAT, 1.06, 0.87, "Complete protein source"),
    ProteinSource.named(
        "Turkey Breast", _MEAT, 1.07, 0.95, "Lean, high-quality protein"
    ),
    ProteinSource.named(
        "Greek Yogurt", _DAIRY, 1.15, 1.0, "Concentrated protein with probiotics"
    ),
    # Plant sources
    ProteinSource.named(
        "Soy Protein Isolate", _SUPPLEMENT, 0.90, 1.0, "Highest quality plant protein"
    ),
    ProteinSource.named("Tofu (Firm)", _PLANT, 0.87, 0.95, "Complete plant protein"),
    ProteinSource.named("Quinoa", _PLANT, 0.84, 0.73, "Complete grain protein"),
    ProteinSource.named(
        "Hemp Seeds", _PLANT, 0.61, 0.63, "Complete plant protein with healthy fats"
    ),
    ProteinSource.named("Spirulina", _SUPPLEMENT, 0.69, 0.68, "Blue-green algae protein"),
    ProteinSource.named(
        "Lentils (Cooked)", _PLANT, 0.63, 0.52, "High-fiber legume protein"
    ),
    ProteinSource.named(
        "Chickpeas (Cooked)", _PLANT, 0.58, 0.71, "Versatile legume protein"
    ),
    ProteinSource.named(
        "Black Beans (Cooked)", _PLANT, 0.56, 0.65, "High-fiber bean protein"
    ),
    ProteinSource.named(
        "Pea Protein", _SUPPLEMENT, 0.67, 0.69, "Popular plant protein powder"
    ),
    ProteinSource.named(
        "Brown Rice Protein", _SUPPLEMENT, 0.42, 0.55, "Hypoallergenic grain protein"
    ),
    ProteinSource.named("Almonds", _PLANT, 0.40, 0.52, "Nut protein with healthy fats"),
    ProteinSource.named(
        "Peanuts", _PLANT, 0.43, 0.52, "Legume with moderate protein quality"
    ),
    ProteinSource.named(
        "Chia Seeds", _PLANT, 0.58, description="Seeds with omega-3 fatty acids"
    ),
    ProteinSource.named(
        "Pumpkin Seeds", _PLANT, 0.46, description="Mineral-rich seed protein"
    ),
    # Dairy
    ProteinSource.named(
        "Cottage Cheese", _DAIRY, 1.16, 1.0, "High-casein dairy protein"
    ),
    ProteinSource.named("Cheddar Cheese", _DAIRY, 1.12, 1.0, "Complete dairy protein"),
    ProteinSource.named(
        "Casein Protein", _SUPPLEMENT, 1.14, 1.0, "Slow-digesting complete protein"
    ),
    # Grains and cereals
    ProteinSource.named("Oats", _PLANT, 0.54, 0.57, "Whole grain with moderate protein"),
    ProteinSource.named("Wheat (Whole)", _PLANT, 0.45, 0.54, "Cereal grain protein"),
    ProteinSource.named("Barley", _PLANT, 0.56, description="Ancient grain protein"),
    # Other supplements
    ProteinSource.named(
        "Collagen Peptides",
        _SUPPLEMENT,
        0.37,
        description="Incomplete protein for skin/joint health",
    ),
    ProteinSource.named(
        "BCAA Powder", _SUPPLEMENT, description="Branched-chain amino acids only"
    ),
    # Seafood
    ProteinSource.named("Tuna (Canned)", _MEAT, 1.08, 1.0, "Lean fish protein"),
    ProteinSource.named(
        "Sardines", _MEAT, 1.05, 1.0, "Small fish with complete protein"
    ),
    ProteinSource.named("Shrimp", _MEAT, 1.09, 1.0, "Low-fat seafood protein"),
    # Vegetables
    ProteinSource.named(
        "Broccoli", _PLANT, 0.58, description="Vegetable with moderate protein"
    ),
    ProteinSource.named(
        "Spinach", _PLANT, 0.51, description="Leafy green with some protein"
    ),
)
