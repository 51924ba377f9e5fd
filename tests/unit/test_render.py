import io

import pytest

from c4_gen import (
    Component,
    Container,
    Database,
    DeploymentNode,
    Diagram,
    Direction,
    EnterpriseBoundary,
    Layout,
    Person,
    Property,
    Queue,
    Relation,
    Step,
    System,
    UnsupportedElementError,
)
from c4_gen.render import edge_line, element_lines

from .helpers import body_lines, preamble


def test_empty_diagram_is_preamble_then_epilogue():
    d = Diagram("Empty")
    assert d.to_plantuml() == preamble("Empty") + "@enduml\n"


def test_render_is_idempotent():
    d = Diagram("Twice", legend=True)
    p = Person("p", "P", "someone")
    s = System("s", "S", "something")
    d.add_elements(p, s)
    d.new_relation(p, s, "uses")
    first = d.to_plantuml()
    assert d.to_plantuml() == first
    assert len(d.elements) == 2 and len(d.relations) == 1


def test_end_to_end_person_uses_system():
    d = Diagram("Orders")
    p = Person("P", "Alice", "A customer")
    s = System("S", "Orders", "Order management")
    d.add_element(p)
    d.add_element(s)
    d.new_relation(p, s, "Places orders using", ["HTTPS"], Direction.DOWN)

    assert d.to_plantuml() == (
        preamble("Orders")
        + 'Person(P, "Alice", "A customer")\n'
        + 'System(S, "Orders", "Order management")\n'
        + 'Rel_Down(P, S, "Places orders using", "HTTPS")\n'
        + "@enduml\n"
    )


def test_leaf_macros_and_external_suffix():
    cases = [
        (Person("a", "A", "d"), 'Person(a, "A", "d")'),
        (Person("a", "A", "d", external=True), 'Person_Ext(a, "A", "d")'),
        (System("a", "A", "d"), 'System(a, "A", "d")'),
        (System("a", "A", "d", external=True), 'System_Ext(a, "A", "d")'),
        (Container("a", "A", "d", ["Go"]), 'Container(a, "A", "Go", "d")'),
        (Container("a", "A", "d", ["Go"], True), 'Container_Ext(a, "A", "Go", "d")'),
        (Database("a", "A", "d", ["PostgreSQL"]), 'ContainerDb(a, "A", "PostgreSQL", "d")'),
        (Database("a", "A", "d", external=True), 'ContainerDb_Ext(a, "A", "", "d")'),
        (Queue("a", "A", "d", ["Kafka"]), 'ContainerQueue(a, "A", "Kafka", "d")'),
        (Queue("a", "A", "d", external=True), 'ContainerQueue_Ext(a, "A", "", "d")'),
        (Component("a", "A", "d"), 'Component(a, "A", "", "d")'),
        (Component("a", "A", "d", external=True), 'Component_Ext(a, "A", "", "d")'),
    ]
    for el, expected in cases:
        assert element_lines(el) == [expected]


def test_element_technologies_join_with_comma_space():
    c = Component("api", "API", "Serves requests", ["Go", "gRPC"])
    assert element_lines(c) == ['Component(api, "API", "Go, gRPC", "Serves requests")']


def test_edge_technologies_join_without_space():
    a, b = System("a"), System("b")
    rel = Relation(a, b, "calls", ["JSON", "HTTPS"])
    assert edge_line(rel) == 'Rel(a, b, "calls", "JSON,HTTPS")'


def test_direction_suffix():
    a, b = System("a"), System("b")
    assert edge_line(Relation(a, b, "x", direction=Direction.RIGHT)).startswith("Rel_Right(")
    assert edge_line(Relation(a, b, "x")).startswith("Rel(")
    # Unknown directions are passed through as-is.
    assert edge_line(Relation(a, b, "x", direction="Diagonal")).startswith("Rel_Diagonal(")


def test_self_relation_renders_literally():
    a = System("a")
    assert edge_line(Relation(a, a, "talks to itself")) == 'Rel(a, a, "talks to itself", "")'


def test_boundary_wraps_children_in_order():
    boundary = System("sys", "Sys", "ignored").boundary()
    boundary.add_element(Container("a", "A", "first"))
    boundary.add_element(Container("b", "B", "second"))
    assert element_lines(boundary) == [
        'System_Boundary(sys, "Sys") {',
        '\tContainer(a, "A", "", "first")',
        '\tContainer(b, "B", "", "second")',
        "}",
    ]


def test_container_and_enterprise_boundaries():
    cb = Container("api", "API").boundary()
    cb.add_element(Component("c", "C"))
    eb = EnterpriseBoundary("corp", "Corp")
    eb.add_element(cb)
    assert element_lines(eb) == [
        'Enterprise_Boundary(corp, "Corp") {',
        '\tContainer_Boundary(api, "API") {',
        '\t\tComponent(c, "C", "", "")',
        "\t}",
        "}",
    ]


def test_nested_deployment_nodes_with_properties():
    child = DeploymentNode(
        "childNode",
        name="Child Node",
        description="inner",
        properties=[Property("Memory", "100Mb"), Property("Storage", "50Gb")],
    )
    child.add_element(Container("childContainer", "Child Container", "x", ["Technology"]))
    parent = DeploymentNode(
        "parentNode",
        name="Parent Node",
        node_type="k8s",
        description="outer",
        properties=[Property("Location", "New York")],
        elements=[child],
    )
    assert element_lines(parent) == [
        'AddProperty("Location", "New York")',
        'Deployment_Node(parentNode, "Parent Node", "k8s", "outer") {',
        '\tAddProperty("Memory", "100Mb")',
        '\tAddProperty("Storage", "50Gb")',
        '\tDeployment_Node(childNode, "Child Node", "", "inner") {',
        '\t\tContainer(childContainer, "Child Container", "Technology", "x")',
        "\t}",
        "}",
    ]


def test_order_preserved_for_elements_relations_and_steps():
    a, b, c = System("a"), System("b"), System("c")
    d = Diagram("Order")
    d.add_elements(c, a, b)
    d.new_relation(b, a, "r1")
    d.new_relation(a, c, "r2")
    d.add_steps(Step(c, b, "s1"), Step(a, a, "s2"))
    d.new_relation(c, a, "r3")

    assert body_lines(d.to_plantuml()) == [
        'System(c, "", "")',
        'System(a, "", "")',
        'System(b, "", "")',
        'Rel(b, a, "r1", "")',
        'Rel(a, c, "r2", "")',
        'Rel(c, a, "r3", "")',
        'Rel(c, b, "s1", "")',
        'Rel(a, a, "s2", "")',
    ]


def test_layout_sketch_and_epilogue_flags():
    d = Diagram(
        "Flags",
        layout=Layout.LANDSCAPE,
        sketch=True,
        legend=True,
        hide_element_types=True,
    )
    assert d.to_plantuml() == (
        preamble("Flags", layout="LAYOUT_LANDSCAPE", sketch=True)
        + "HIDE_STEREOTYPE()\n\n"
        + "SHOW_LEGEND($hideStereotype=false)\n\n"
        + "@enduml\n"
    )


def test_legend_never_hides_stereotypes():
    d = Diagram("Legend", legend=True)
    doc = d.to_plantuml()
    assert "SHOW_LEGEND($hideStereotype=false)" in doc
    assert "HIDE_STEREOTYPE()" not in doc


def test_unsupported_element_kind_fails_and_writes_nothing():
    class Mystery:
        id = "m"

    d = Diagram("Broken")
    d.add_element(System("ok"))
    d.add_element(Mystery())  # type: ignore[arg-type]

    sink = io.StringIO()
    with pytest.raises(UnsupportedElementError) as excinfo:
        d.plantuml(sink)
    assert "Mystery" in str(excinfo.value)
    assert isinstance(excinfo.value.item, Mystery)
    assert sink.getvalue() == ""


def test_unsupported_child_inside_boundary():
    boundary = System("s").boundary()
    boundary.add_element("not an element")  # type: ignore[arg-type]
    with pytest.raises(UnsupportedElementError, match="str"):
        element_lines(boundary)


def test_plantuml_writes_to_sink():
    d = Diagram("Sink")
    sink = io.StringIO()
    d.plantuml(sink)
    assert sink.getvalue() == d.to_plantuml()


def test_text_is_not_escaped():
    p = Person("p", 'Say "hi"', "line\\nbreak")
    assert element_lines(p) == ['Person(p, "Say "hi"", "line\\nbreak")']
