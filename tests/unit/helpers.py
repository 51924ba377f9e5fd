INCLUDES = (
    "!include https://raw.githubusercontent.com/plantuml-stdlib/C4-PlantUML/master/C4_Container.puml\n"
    "!include https://raw.githubusercontent.com/plantuml-stdlib/C4-PlantUML/master/C4_Component.puml\n"
    "!include https://raw.githubusercontent.com/plantuml-stdlib/C4-PlantUML/master/C4_Deployment.puml\n"
)

DEFAULT_STYLES = (
    'UpdateElementStyle(system, $bgColor="#4E668A", $fontColor="#F5F5F5")\n'
    'UpdateElementStyle(container, $bgColor="#6C8EBF", $fontColor="#262626")\n'
    'UpdateElementStyle(component, $bgColor="#94B3E0", $fontColor="#262626")\n'
    'UpdateElementStyle(person, $bgColor="#455A7A", $fontColor="#ffffff")\n'
)


def preamble(title: str, layout: str = "LAYOUT_TOP_DOWN", sketch: bool = False, styles: str = DEFAULT_STYLES) -> str:
    out = f"@startuml {title}\n" + INCLUDES + "\nWithoutPropertyHeader()\n\n" + f"{layout}()\n"
    if sketch:
        out += "LAYOUT_AS_SKETCH()\n"
    return out + "\n" + styles


def body_lines(document: str) -> list[str]:
    """Lines between the last style line and the closing marker."""
    lines = document.splitlines()
    start = max(i for i, line in enumerate(lines) if line.startswith("UpdateElementStyle(")) + 1
    end = lines.index("@enduml")
    return lines[start:end]
