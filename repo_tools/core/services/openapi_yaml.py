"""
OpenAPI YAML loading with YAML 1.2 core-schema scalars.

PyYAML's SafeLoader resolves plain scalars by YAML 1.1 rules, where
``NO``/``yes``/``on``/``off`` are booleans and ``010`` is octal. Schemas
are written against YAML 1.2 (country-code enums, zero-padded example
values), so this loader swaps the bool/int/float resolvers for the 1.2
core ones and rejects duplicate mapping keys instead of letting the
last one win.
"""

from __future__ import annotations

import re
from collections.abc import Hashable
from typing import Any

import yaml
from yaml.constructor import ConstructorError

BOOL_TAG = "tag:yaml.org,2002:bool"
INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"
MERGE_TAG = "tag:yaml.org,2002:merge"

_BOOL_RE = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
_INT_RE = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
_FLOAT_RE = re.compile(
    r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
    |[-+]?\.(?:inf|Inf|INF)
    |\.(?:nan|NaN|NAN))$""",
    re.X,
)


class OpenApiLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 core scalars and duplicate-key errors."""

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> dict[Any, Any]:
        if isinstance(node, yaml.MappingNode):
            seen: set[Any] = set()
            for key_node, _ in node.value:
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue  # SafeConstructor reports unhashable keys itself
                if key in seen:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicated mapping key ({key!r})",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)

    def construct_yaml_int(self, node: yaml.ScalarNode) -> int:
        value = self.construct_scalar(node)
        try:
            if value.startswith("0o"):
                return int(value[2:], 8)
            if value.startswith("0x"):
                return int(value[2:], 16)
            return int(value)
        except ValueError as e:
            raise ConstructorError(
                None, None, f"invalid integer {value!r}", node.start_mark
            ) from e


# Drop the YAML 1.1 bool/int/float resolvers, keep null/timestamp/merge/etc.
OpenApiLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in (BOOL_TAG, INT_TAG, FLOAT_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
# Int before float: first match wins and plain digits satisfy both
OpenApiLoader.add_implicit_resolver(BOOL_TAG, _BOOL_RE, list("tTfF"))
OpenApiLoader.add_implicit_resolver(INT_TAG, _INT_RE, list("-+0123456789"))
OpenApiLoader.add_implicit_resolver(FLOAT_TAG, _FLOAT_RE, list("-+0123456789."))
OpenApiLoader.add_constructor(INT_TAG, OpenApiLoader.construct_yaml_int)


def load_openapi_yaml(text: str) -> Any:
    """Parse an OpenAPI YAML document.

    Raises:
        yaml.YAMLError: Invalid YAML or a duplicated mapping key.
    """
    return yaml.load(text, Loader=OpenApiLoader)
