from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..diagram import Diagram
from .banking import (
    gen_basic,
    gen_components,
    gen_containers,
    gen_deployment,
    gen_dynamic,
    gen_systems,
    gen_theming,
)
from .gallery import GalleryConfig, gen_gallery


@dataclass(frozen=True)
class SampleConfig:
    sketch: bool = False


BuildFn = Callable[[SampleConfig], Diagram]


@dataclass(frozen=True)
class SampleSpec:
    sample_id: str
    title: str
    filename: str
    build: BuildFn


def _ignore_cfg(fn: Callable[[], Diagram]) -> BuildFn:
    def build(_: SampleConfig) -> Diagram:
        return fn()

    return build


def _build_gallery(cfg: SampleConfig) -> Diagram:
    return gen_gallery(GalleryConfig(sketch=cfg.sketch))


SAMPLES: list[SampleSpec] = [
    SampleSpec(
        sample_id="basic",
        title="Basic",
        filename="basic.puml",
        build=_ignore_cfg(gen_basic),
    ),
    SampleSpec(
        sample_id="systems",
        title="System context",
        filename="systems.puml",
        build=_ignore_cfg(gen_systems),
    ),
    SampleSpec(
        sample_id="containers",
        title="Containers",
        filename="containers.puml",
        build=_ignore_cfg(gen_containers),
    ),
    SampleSpec(
        sample_id="components",
        title="Components (API application)",
        filename="components.puml",
        build=_ignore_cfg(gen_components),
    ),
    SampleSpec(
        sample_id="deployment",
        title="Deployment (live)",
        filename="deployment.puml",
        build=_ignore_cfg(gen_deployment),
    ),
    SampleSpec(
        sample_id="dynamic",
        title="Dynamic (sign in)",
        filename="dynamic.puml",
        build=_ignore_cfg(gen_dynamic),
    ),
    SampleSpec(
        sample_id="gallery",
        title="Element gallery",
        filename="gallery.puml",
        build=_build_gallery,
    ),
    SampleSpec(
        sample_id="theming",
        title="Custom theme",
        filename="theming.puml",
        build=_ignore_cfg(gen_theming),
    ),
]


def get_sample(sample_id: str) -> SampleSpec:
    for spec in SAMPLES:
        if spec.sample_id == sample_id:
            return spec
    raise KeyError(
        f"Unknown sample {sample_id!r} (available: {', '.join(s.sample_id for s in SAMPLES)})"
    )
