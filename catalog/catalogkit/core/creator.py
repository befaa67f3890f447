import filecmp
from pathlib import Path
from typing import Dict, List, Optional

from .config import CatalogConfig
from .constants import Kind, State
from .model import RoadMap, Registry
from .roadmap_reader import apply_roadmap_states
from .scanner import scan_descriptors
from .support import detect_supported, namespace_target
from .writers import properties_path, render_properties, render_roadmap, write_properties, write_roadmaps


class CatalogCreator:
    """
    Runs one catalog build: scan -> roadmap states -> support detection -> reports.

    Usage:
        CatalogCreator(config).collect().generate()
    """

    def __init__(self, config: Optional[CatalogConfig] = None):
        self.config = config or CatalogConfig()
        self.registry = Registry(self.config.resdir)

    def roadmap(self, kind: Kind) -> RoadMap:
        return self.registry.roadmap(kind)

    def roadmaps(self) -> List[RoadMap]:
        return self.registry.roadmaps()

    def collect(self, copy: bool = True) -> "CatalogCreator":
        cfg = self.config
        scan_descriptors(self.registry, cfg.srcdir, cfg.descriptor_extension)
        apply_roadmap_states(self.registry)
        detect_supported(
            self.registry,
            cfg.depdir,
            cfg.srcdir,
            cfg.namespace_dir,
            strip_components=cfg.strip_components,
            copy=copy,
        )
        return self

    def generate(self) -> "CatalogCreator":
        write_properties(self.registry, self.config.properties_dir)
        write_roadmaps(self.registry)
        return self

    def rendered_outputs(self) -> Dict[Path, str]:
        """Every output file this run would write, mapped to its content."""
        outputs = {}
        for roadmap in self.registry.roadmaps():
            outputs[properties_path(self.config.properties_dir, roadmap.kind)] = render_properties(roadmap)
            outputs[roadmap.outpath] = render_roadmap(roadmap)
        return outputs

    def stale_outputs(self) -> List[Path]:
        stale = []
        for path, expected in self.rendered_outputs().items():
            try:
                with path.open("r", encoding="utf-8", newline="") as f:
                    actual = f.read()
            except FileNotFoundError:
                stale.append(path)
                continue
            if actual != expected:
                stale.append(path)
        stale.extend(self.stale_copies())
        return stale

    def stale_copies(self) -> List[Path]:
        """Copied descriptors of supported items that are missing or differ from their source."""
        cfg = self.config
        stale = []
        for item in self.registry.items():
            if item.state != State.SUPPORTED:
                continue
            target = namespace_target(cfg.namespace_dir, item.path, cfg.strip_components)
            if not target.is_file() or not filecmp.cmp(cfg.srcdir / item.path, target, shallow=False):
                stale.append(target)
        return stale
