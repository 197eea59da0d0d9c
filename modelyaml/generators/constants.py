"""Fixed text and keys shared by the document generators."""

HEADER_LINES: tuple[str, ...] = (
    "# model.yaml is an open standard for defining cross-platform, composable AI models",
    "# Learn more at https://modelyaml.org",
)

SOURCE_TYPE = "huggingface"

# Fallbacks used when a numeric field doesn't parse
MIN_MEMORY_USAGE_BYTES_FALLBACK = 0
TOP_K_SAMPLING_FALLBACK = 20
TEMPERATURE_FALLBACK = 0.7
MIN_P_SAMPLING_FALLBACK = 0
LOAD_CONTEXT_LENGTH_FALLBACK = 0

TOP_K_SAMPLING_KEY = "llm.prediction.topKSampling"
TEMPERATURE_KEY = "llm.prediction.temperature"
MIN_P_SAMPLING_KEY = "llm.prediction.minPSampling"
LOAD_CONTEXT_LENGTH_KEY = "llm.load.contextLength"

# The optional "Enable Thinking" toggle, bound to a prompt-template variable
THINKING_FIELD_KEY = "enableThinking"
THINKING_FIELD_DISPLAY_NAME = "Enable Thinking"
THINKING_FIELD_DESCRIPTION = "Controls whether the model will think before replying"
THINKING_FIELD_EFFECT = "setJinjaVariable"
THINKING_FIELD_VARIABLE = "enable_thinking"

MANIFEST_TYPE = "model"
MANIFEST_PURPOSE = "baseModel"
MANIFEST_REVISION = 1
