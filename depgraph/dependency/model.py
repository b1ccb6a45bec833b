"""
depgraph/dependency/model.py — Artifact coordinates used as graph payloads.
"""

from dataclasses import dataclass

DEFAULT_SCOPE = "compile"
DEFAULT_TYPE = "jar"


@dataclass(frozen=True)
class DependencyNode:
    """
    One resolved artifact.

    Fields:
        group_id:    Organisation / namespace (e.g. 'com.google.guava').
        artifact_id: Artifact name within the group.
        version:     Resolved version ('' when unknown).
        scope:       'compile' | 'runtime' | 'test' | 'provided' | 'system' | 'import'.
        type:        Packaging type (default 'jar').
        classifier:  Optional classifier ('' when absent).
        optional:    True if declared <optional>.
    """

    group_id: str
    artifact_id: str
    version: str = ""
    scope: str = DEFAULT_SCOPE
    type: str = DEFAULT_TYPE
    classifier: str = ""
    optional: bool = False

    @classmethod
    def from_coordinates(
        cls,
        coordinates: str,
        scope: str = DEFAULT_SCOPE,
        optional: bool = False,
    ) -> "DependencyNode":
        """
        Parse 'group:artifact:version', 'group:artifact:type:version' or
        'group:artifact:type:classifier:version'.

        Raises:
            ValueError: Wrong number of segments, or empty group/artifact.
        """
        parts = [part.strip() for part in coordinates.strip().split(":")]
        if len(parts) == 3:
            group_id, artifact_id, version = parts
            type_, classifier = DEFAULT_TYPE, ""
        elif len(parts) == 4:
            group_id, artifact_id, type_, version = parts
            classifier = ""
        elif len(parts) == 5:
            group_id, artifact_id, type_, classifier, version = parts
        else:
            raise ValueError(
                f"Malformed coordinates {coordinates!r}: expected "
                "group:artifact[:type[:classifier]]:version"
            )

        if not group_id or not artifact_id:
            raise ValueError(f"Malformed coordinates {coordinates!r}: empty group or artifact id")

        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            scope=scope or DEFAULT_SCOPE,
            type=type_ or DEFAULT_TYPE,
            classifier=classifier,
            optional=optional,
        )

    @property
    def coordinates(self) -> str:
        parts = [self.group_id, self.artifact_id, self.type]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)
