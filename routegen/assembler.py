"""Assemble the configure() body for a whole specification.

Walks every path in declaration order and collects the statements the
emitters produce, after a bootstrap statement declaring the ``rest``
handle they all chain from.
"""

from __future__ import annotations

import logging

from .emitter import OperationEmitter, visit_path
from .model import Specification
from .naming import class_name_for
from .statement import Fragment, GeneratedArtifact, GeneratedStatement

logger = logging.getLogger(__name__)

BOOTSTRAP_STATEMENT = GeneratedStatement((Fragment("final RestDefinition rest = rest()"),))


def build_artifact(
    spec: Specification,
    emitter_factory: type[OperationEmitter] = OperationEmitter,
) -> GeneratedArtifact:
    """Build the generated class name and its ordered statements."""
    statements: list[GeneratedStatement] = [BOOTSTRAP_STATEMENT]

    for path, path_item in spec.paths.items():
        emitted = visit_path(path, path_item, emitter_factory)
        logger.debug("Emitted %d statement(s) for %s", len(emitted), path)
        statements.extend(emitted)

    name = class_name_for(spec.title)
    if not name:
        logger.warning("Title %r yields an empty class name", spec.title)

    return GeneratedArtifact(name=name, statements=tuple(statements))
