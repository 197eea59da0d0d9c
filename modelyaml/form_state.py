"""The editable form record behind both generated documents.

Numeric and list fields are stored as the raw strings the user typed.  They
are only coerced when a document is generated (see ``modelyaml.normalize``).
"""

from pydantic import BaseModel, ConfigDict, Field

from modelyaml.errors import UnknownFormField


class FormState(BaseModel):
    """Immutable snapshot of every form field.

    Attributes are snake_case; each one also answers to the camelCase name
    used in the form (``minPSamplingChecked`` etc.).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
        populate_by_name=True,
        protected_namespaces=(),
    )

    # Core identity
    publisher: str = Field(alias="publisher", description="Owner; first half of `model:`")
    model_name: str = Field(alias="modelName", description="Slug; second half of `model:`")
    base_key: str = Field(alias="baseKey", description="Virtual key of the wrapped base model")
    hf_user: str = Field(alias="hfUser", description="Hugging Face user or org")
    hf_repo: str = Field(alias="hfRepo", description="Hugging Face repository")

    # metadataOverrides
    domain: str = Field(alias="domain")
    architectures: str = Field(alias="architectures", description="Comma-separated")
    compatibility_types: str = Field(alias="compatibilityTypes", description="Comma-separated")
    params_strings: str = Field(alias="paramsStrings", description="Comma-separated")
    min_memory_usage_bytes: str = Field(alias="minMemoryUsageBytes", description="Numeric")
    context_lengths: str = Field(alias="contextLengths", description="Comma-separated numbers")
    vision: bool = Field(alias="vision")
    reasoning: bool = Field(alias="reasoning")
    trained_for_tool_use: bool = Field(alias="trainedForToolUse")

    # config.operation
    top_k_sampling: str = Field(alias="topKSampling", description="Numeric")
    temperature: str = Field(alias="temperature", description="Numeric")
    min_p_sampling_checked: bool = Field(alias="minPSamplingChecked")
    min_p_sampling: str = Field(alias="minPSampling", description="Numeric")

    # config.load
    load_context_length: str = Field(
        alias="loadContextLength", description="Numeric; 0 leaves the load block out"
    )

    # customFields
    enable_thinking_field: bool = Field(alias="enableThinkingField")

    def to_form_dict(self) -> dict:
        """Return the record keyed by camelCase form names, in form order."""
        return self.model_dump(by_alias=True)


DEFAULT_FORM_VALUES: dict[str, str | bool] = {
    "publisher": "dirty-data",
    "modelName": "qwen3-vl-8b-bartowski",
    "baseKey": "bartowski/qwen3-vl-8b-instruct-gguf",
    "hfUser": "bartowski",
    "hfRepo": "Qwen_Qwen3-VL-8B-Instruct-GGUF",
    "domain": "llm",
    "architectures": "qwen3_vl",
    "compatibilityTypes": "gguf",
    "paramsStrings": "8B",
    "minMemoryUsageBytes": "6000000000",
    "contextLengths": "256000",
    "vision": True,
    "reasoning": True,
    "trainedForToolUse": True,
    "topKSampling": "20",
    "temperature": "0.7",
    "minPSamplingChecked": True,
    "minPSampling": "0",
    "loadContextLength": "256000",
    "enableThinkingField": True,
}

# camelCase alias -> attribute name
_ALIASES: dict[str, str] = {info.alias: name for name, info in FormState.model_fields.items()}


def create_default_form_state() -> FormState:
    """Build the form record the editor starts from."""
    return FormState.model_validate(DEFAULT_FORM_VALUES)


def resolve_field_name(key: str) -> str:
    """Map a camelCase form name or a snake_case attribute name to the attribute name."""
    if key in FormState.model_fields:
        return key
    if key in _ALIASES:
        return _ALIASES[key]
    raise UnknownFormField(key)


def field_type(key: str) -> type:
    """Return ``str`` or ``bool`` for the named field."""
    return FormState.model_fields[resolve_field_name(key)].annotation


def update_field(state: FormState, key: str, value: str | bool) -> FormState:
    """Return a copy of *state* with one field replaced.

    The value is validated against the field's type; *state* itself is
    never touched.
    """
    name = resolve_field_name(key)
    return FormState.model_validate({**state.model_dump(), name: value})
