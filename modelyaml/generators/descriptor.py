"""Render a form state as model.yaml text.

The document is built line by line rather than through a YAML library, so
every formatting rule (indentation, which blocks appear, blank-line
placement) is visible right here.  Values are written verbatim, unquoted.
"""

from modelyaml.form_state import FormState
from modelyaml.generators.constants import (
    HEADER_LINES,
    LOAD_CONTEXT_LENGTH_FALLBACK,
    LOAD_CONTEXT_LENGTH_KEY,
    MIN_MEMORY_USAGE_BYTES_FALLBACK,
    MIN_P_SAMPLING_FALLBACK,
    MIN_P_SAMPLING_KEY,
    SOURCE_TYPE,
    TEMPERATURE_FALLBACK,
    TEMPERATURE_KEY,
    THINKING_FIELD_DESCRIPTION,
    THINKING_FIELD_DISPLAY_NAME,
    THINKING_FIELD_EFFECT,
    THINKING_FIELD_KEY,
    THINKING_FIELD_VARIABLE,
    TOP_K_SAMPLING_FALLBACK,
    TOP_K_SAMPLING_KEY,
)
from modelyaml.normalize import format_number, to_list, to_number, to_number_list


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _list_block(lines: list[str], key: str, items: list[str]) -> None:
    """Append an indented list under *key*, or nothing at all when *items* is empty."""
    if not items:
        return
    lines.append(f"  {key}:")
    lines.extend(f"    - {item}" for item in items)


def _base_block(state: FormState) -> list[str]:
    return [
        "base:",
        f"  - key: {state.base_key}",
        "    sources:",
        f"      - type: {SOURCE_TYPE}",
        f"        user: {state.hf_user}",
        f"        repo: {state.hf_repo}",
    ]


def _metadata_block(state: FormState) -> list[str]:
    lines = ["metadataOverrides:", f"  domain: {state.domain}"]

    _list_block(lines, "architectures", to_list(state.architectures))
    _list_block(lines, "compatibilityTypes", to_list(state.compatibility_types))
    _list_block(lines, "paramsStrings", to_list(state.params_strings))

    min_memory = to_number(state.min_memory_usage_bytes, MIN_MEMORY_USAGE_BYTES_FALLBACK)
    if min_memory > 0:
        lines.append(f"  minMemoryUsageBytes: {format_number(min_memory)}")

    context_lengths = [format_number(n) for n in to_number_list(state.context_lengths)]
    _list_block(lines, "contextLengths", context_lengths)

    lines.append(f"  vision: {_flag(state.vision)}")
    lines.append(f"  reasoning: {_flag(state.reasoning)}")
    lines.append(f"  trainedForToolUse: {_flag(state.trained_for_tool_use)}")
    return lines


def _config_block(state: FormState) -> list[str]:
    top_k = to_number(state.top_k_sampling, TOP_K_SAMPLING_FALLBACK)
    temperature = to_number(state.temperature, TEMPERATURE_FALLBACK)

    lines = [
        "config:",
        "  operation:",
        "    fields:",
        f"      - key: {TOP_K_SAMPLING_KEY}",
        f"        value: {format_number(top_k)}",
        f"      - key: {TEMPERATURE_KEY}",
        f"        value: {format_number(temperature)}",
    ]

    if state.min_p_sampling_checked:
        min_p = to_number(state.min_p_sampling, MIN_P_SAMPLING_FALLBACK)
        lines += [
            f"      - key: {MIN_P_SAMPLING_KEY}",
            "        value:",
            "          checked: true",
            f"          value: {format_number(min_p)}",
        ]

    load_context_length = to_number(state.load_context_length, LOAD_CONTEXT_LENGTH_FALLBACK)
    if load_context_length > 0:
        lines += [
            "  load:",
            "    fields:",
            f"      - key: {LOAD_CONTEXT_LENGTH_KEY}",
            f"        value: {format_number(load_context_length)}",
        ]
    return lines


def _custom_fields_block() -> list[str]:
    return [
        "customFields:",
        f"  - key: {THINKING_FIELD_KEY}",
        f"    displayName: {THINKING_FIELD_DISPLAY_NAME}",
        f"    description: {THINKING_FIELD_DESCRIPTION}",
        "    type: boolean",
        "    defaultValue: true",
        "    effects:",
        f"      - type: {THINKING_FIELD_EFFECT}",
        f"        variable: {THINKING_FIELD_VARIABLE}",
    ]


def generate_model_yaml(state: FormState) -> str:
    """Return the model.yaml document for *state* (no trailing newline).

    Optional entries (list overrides, ``minMemoryUsageBytes``, the min-P
    field, the ``load`` block, ``customFields``) are either emitted whole or
    left out entirely.
    """
    lines = list(HEADER_LINES)
    lines.append(f"model: {state.publisher}/{state.model_name}")
    lines.append("")
    lines += _base_block(state)
    lines.append("")
    lines += _metadata_block(state)
    lines.append("")
    lines += _config_block(state)

    if state.enable_thinking_field:
        lines.append("")
        lines += _custom_fields_block()

    return "\n".join(lines)
