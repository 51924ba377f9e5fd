import dataclasses

import pytest

from c4_gen import (
    Container,
    ContainerBoundary,
    DeploymentNode,
    Diagram,
    Direction,
    Palette,
    Person,
    Relation,
    Step,
    System,
    SystemBoundary,
    Theme,
    default_theme,
)
from c4_gen.elements import iter_elements
from c4_gen.render import element_lines

from .helpers import DEFAULT_STYLES, preamble


def test_boundary_shares_identity_and_starts_empty():
    s = System("sys", "Sys", "desc")
    b = s.boundary()
    assert isinstance(b, SystemBoundary)
    assert (b.id, b.name, b.elements) == ("sys", "Sys", [])
    assert s.boundary() is not b

    c = Container("api", "API")
    cb = c.boundary()
    assert isinstance(cb, ContainerBoundary)
    assert (cb.id, cb.name) == ("api", "API")


def test_add_element_has_no_side_effect_on_child():
    child = Container("c", "C")
    first, second = System("a").boundary(), System("b").boundary()
    first.add_element(child)
    second.add_element(child)
    assert first.elements == [child] and second.elements == [child]
    assert child == Container("c", "C")


def test_leaf_elements_are_immutable():
    p = Person("p", "P")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.name = "Q"  # type: ignore[misc]


def test_technologies_are_copied_into_tuples():
    techs = ["Go"]
    c = Container("c", technologies=techs)
    techs.append("Rust")
    assert c.technologies == ("Go",)


def test_bare_string_is_a_single_technology():
    c = Container("api", "API", "d", technologies="Go")
    assert c.technologies == ("Go",)
    assert element_lines(c) == ['Container(api, "API", "Go", "d")']

    d = Diagram("t")
    b = System("b")
    rel = d.new_relation(c, b, "calls", "HTTPS")
    step = d.new_step(c, b, "calls", "gRPC")
    assert rel.technologies == ("HTTPS",)
    assert step.technologies == ("gRPC",)
    assert Relation(c, b, technologies="JSON").technologies == ("JSON",)
    assert 'Rel(api, b, "calls", "HTTPS")' in d.to_plantuml()


def test_deployment_node_copies_constructor_lists():
    children = [Container("a")]
    node = DeploymentNode("n", elements=children)
    node.add_element(Container("b"))
    assert [el.id for el in node.elements] == ["a", "b"]
    assert len(children) == 1


def test_iter_elements_walks_depth_first():
    inner = DeploymentNode("inner", elements=[Container("c")])
    outer = System("s").boundary()
    outer.add_elements(inner, Container("d"))
    assert [el.id for el in iter_elements([outer, Person("p")])] == ["s", "inner", "c", "d", "p"]


def test_step_shares_relation_shape():
    a, b = System("a"), System("b")
    step = Step(a, b, "next", ["HTTP"], Direction.UP)
    assert isinstance(step, Relation)
    assert (step.src, step.dst, step.technologies, step.direction) == (a, b, ("HTTP",), Direction.UP)


def test_new_relation_and_new_step_register_and_return():
    a, b = System("a"), System("b")
    d = Diagram("d")
    rel = d.new_relation(a, b, "calls", ["gRPC"])
    step = d.new_step(b, a, "answers")
    assert d.relations == [rel]
    assert d.steps == [step]
    assert isinstance(step, Step)


def test_default_theme_values():
    t = default_theme()
    assert t.system == Palette("#4E668A", "#F5F5F5")
    assert t.container == Palette("#6C8EBF", "#262626")
    assert t.component == Palette("#94B3E0", "#262626")
    assert t.person == Palette("#455A7A", "#ffffff")
    assert Diagram("x").theme == t


def test_partial_theme_only_changes_its_category():
    d = Diagram("Themed", theme=Theme(system=Palette("red", "white")))
    expected_styles = DEFAULT_STYLES.replace(
        'UpdateElementStyle(system, $bgColor="#4E668A", $fontColor="#F5F5F5")',
        'UpdateElementStyle(system, $bgColor="red", $fontColor="white")',
    )
    assert d.to_plantuml() == preamble("Themed", styles=expected_styles) + "@enduml\n"


def test_theme_with_overrides_returns_copy():
    base = default_theme()
    tweaked = base.with_overrides(person=Palette("green", "grey"))
    assert tweaked.person == Palette("green", "grey")
    assert tweaked.system == base.system
    assert base.person == Palette("#455A7A", "#ffffff")
