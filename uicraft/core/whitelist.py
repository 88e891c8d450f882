# uicraft/core/whitelist.py
"""
Component whitelist - the layout primitives and components a plan may use.

Pure configuration data. The pipeline only asks the provider to respect it
(via the prompts); nothing here enforces it on generated output.
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from uicraft.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ComponentSpec:
    name: str
    props: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ComponentWhitelist:
    """Allowed layout primitives and components with their permitted props."""
    layout: Tuple[str, ...] = ()
    components: Tuple[ComponentSpec, ...] = field(default_factory=tuple)

    def component_names(self) -> List[str]:
        return [c.name for c in self.components]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "layout": list(self.layout),
            "components": [{"name": c.name, "props": list(c.props)} for c in self.components],
        }

    def to_json(self) -> str:
        """Compact serialization embedded in prompts."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentWhitelist":
        if not isinstance(data, dict):
            raise ConfigurationError("Whitelist must be a JSON object")

        layout = data.get("layout", [])
        components = data.get("components", [])
        if not isinstance(layout, list) or not all(isinstance(x, str) for x in layout):
            raise ConfigurationError("Whitelist 'layout' must be a list of names")
        if not isinstance(components, list):
            raise ConfigurationError("Whitelist 'components' must be a list")

        specs = []
        for entry in components:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                raise ConfigurationError(f"Invalid whitelist component: {entry!r}")
            props = entry.get("props", [])
            if not isinstance(props, list) or not all(isinstance(p, str) for p in props):
                raise ConfigurationError(f"Invalid props for component {entry['name']}")
            specs.append(ComponentSpec(entry["name"], tuple(props)))

        return cls(layout=tuple(layout), components=tuple(specs))


DEFAULT_WHITELIST = ComponentWhitelist(
    layout=("Container", "Row", "Column", "Sidebar", "Navbar"),
    components=(
        ComponentSpec("Navbar", ("title",)),
        ComponentSpec("Sidebar", ("title", "items")),
        ComponentSpec("Button", ("label", "variant", "size")),
        ComponentSpec("Card", ("title", "description")),
        ComponentSpec("Input", ("placeholder", "label", "type")),
        ComponentSpec("Table", ("headers", "dataRows")),
        ComponentSpec("Chart", ("type", "data")),
    ),
)


def load_whitelist(path: Union[str, Path, None] = None) -> ComponentWhitelist:
    """
    Load a whitelist from a JSON file, or return the built-in default.

    Raises:
        ConfigurationError: file missing or not shaped like the default
    """
    if not path:
        return DEFAULT_WHITELIST

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(f"Whitelist file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Whitelist file is not valid JSON: {e}")

    return ComponentWhitelist.from_dict(data)
