# c4_gen/constants.py
from __future__ import annotations

C4_PLANTUML_BASE_URL = "https://raw.githubusercontent.com/plantuml-stdlib/C4-PlantUML/master"

# Emitted in this order; the component and deployment libraries build on the
# container one.
C4_INCLUDES: tuple[str, ...] = (
    f"{C4_PLANTUML_BASE_URL}/C4_Container.puml",
    f"{C4_PLANTUML_BASE_URL}/C4_Component.puml",
    f"{C4_PLANTUML_BASE_URL}/C4_Deployment.puml",
)

DIRECTIONS: tuple[str, ...] = ("Up", "Down", "Left", "Right")

# Style categories accepted by UpdateElementStyle, in preamble order.
THEME_CATEGORIES: tuple[str, ...] = ("system", "container", "component", "person")

ELEMENT_TECH_SEP = ", "
EDGE_TECH_SEP = ","

EXT_SUFFIX = "_Ext"

# Split-model filenames (loaded in deterministic order).
MODEL_PART_FILES: tuple[str, ...] = (
    "00_diagram.yaml",
    "10_theme.yaml",
    "20_elements.yaml",
    "30_relations.yaml",
    "40_steps.yaml",
)

# Top-level model sections: mappings merge key by key, lists concatenate.
MODEL_MAPPING_SECTIONS: tuple[str, ...] = ("diagram", "theme")
MODEL_LIST_SECTIONS: tuple[str, ...] = ("elements", "relations", "steps")
