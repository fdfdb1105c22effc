"""Loading dependency graphs from TOML definition files.

A definition file holds one ``[depends]`` table mapping each node name
to the names it depends on:

    [depends]
    b = ["a"]
    c = ["b", "a"]
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._graph import DependencyGraph

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error in a graph definition file."""


class GraphFile(BaseModel):
    """Validated contents of a graph definition file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    depends: dict[str, list[str]] = Field(default_factory=dict)

    def edges(self) -> list[tuple[str, str]]:
        """Return (node, dep) pairs in file order."""
        return [(node, dep) for node, deps in self.depends.items() for dep in deps]


def toml_to_graph(toml_contents: dict[str, Any]) -> DependencyGraph[str]:
    """Convert parsed TOML contents to a dependency graph.

    Args:
        toml_contents: The parsed TOML dictionary

    Returns:
        A graph holding every edge of the ``[depends]`` table

    Raises:
        GraphFileError: If the contents do not match the expected layout
        CycleDetectedError: If the edges contain a cycle

    """
    try:
        graph_file = GraphFile.model_validate(toml_contents)
    except ValidationError as e:
        msg = f"Invalid graph definition: {e}"
        raise GraphFileError(msg) from e

    graph: DependencyGraph[str] = DependencyGraph()
    for node, dep in graph_file.edges():
        graph.depend(node, dep)

    # Nodes only exist through edges
    for node, deps in graph_file.depends.items():
        if not deps and node not in graph:
            logger.warning(f"Node '{node}' has no dependencies and no dependents; it is not added to the graph")

    return graph


def load_graph_from_toml(input_path: Path | str) -> DependencyGraph[str]:
    """Load a dependency graph from a TOML definition file.

    Args:
        input_path: Path to the TOML file

    Returns:
        The loaded graph

    Raises:
        GraphFileError: If the file is missing, is not valid TOML, or has an unexpected layout
        CycleDetectedError: If the edges contain a cycle

    """
    input_path = Path(input_path)

    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {input_path}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise GraphFileError(msg) from e

    graph = toml_to_graph(toml_contents)
    logger.debug(f"Loaded {len(graph)} nodes from {input_path}")
    return graph
