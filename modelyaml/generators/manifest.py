"""Render a form state as manifest.json text for publishing the model."""

import json

from pydantic import BaseModel, ConfigDict, Field

from modelyaml.form_state import FormState
from modelyaml.generators.constants import (
    MANIFEST_PURPOSE,
    MANIFEST_REVISION,
    MANIFEST_TYPE,
    SOURCE_TYPE,
)


class ManifestSource(BaseModel):
    """Where the base model's files are downloaded from."""

    type: str = SOURCE_TYPE
    user: str
    repo: str


class ManifestDependency(BaseModel):
    """The base model this package layers its configuration on."""

    model_config = ConfigDict(protected_namespaces=())

    type: str = MANIFEST_TYPE
    purpose: str = MANIFEST_PURPOSE
    model_keys: list[str] = Field(serialization_alias="modelKeys")
    sources: list[ManifestSource]


class Manifest(BaseModel):
    """Top-level manifest.json document. Field order is serialization order."""

    type: str = MANIFEST_TYPE
    owner: str
    name: str
    dependencies: list[ManifestDependency]
    revision: int = MANIFEST_REVISION


def build_manifest(state: FormState) -> Manifest:
    """Build the manifest from the identity fields; everything else is ignored."""
    return Manifest(
        owner=state.publisher,
        name=state.model_name,
        dependencies=[
            ManifestDependency(
                model_keys=[state.base_key],
                sources=[ManifestSource(user=state.hf_user, repo=state.hf_repo)],
            )
        ],
    )


def generate_manifest_json(state: FormState) -> str:
    """Return manifest.json text with 2-space indentation (no trailing newline)."""
    manifest = build_manifest(state)
    return json.dumps(manifest.model_dump(by_alias=True), indent=2, ensure_ascii=False)
