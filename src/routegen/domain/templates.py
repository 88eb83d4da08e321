from __future__ import annotations

"""
Component Stub Templates.

Four fixed bodies are available: Vue 2, Vue 3, JSX and TSX (identical to
JSX). Each carries the literal '[name]' placeholder, which is replaced by
the display name of a route node. The vue bodies additionally take the
style language and, for Vue 3, the TypeScript marker from the options.
"""

from typing import Dict

from routegen.domain.errors import OptionsValidationError
from routegen.domain.options import (
    FILE_SUFFIXES,
    PLACEHOLDER,
    GenerationOptions,
    normalize_suffix,
)

# -----------------------------------------------------------------------------
# TEMPLATE BODIES
# -----------------------------------------------------------------------------

VUE2_TEMPLATE = """<script>
export default {}
</script>
<template>
<div><h1>[name]</h1></div>
</template>
<style lang="{css}" scoped>
</style>
"""

VUE3_TEMPLATE = """<script{script_lang}>
</script>
<template>
<div><h1>[name]</h1></div>
</template>
<style lang="{css}" scoped>
</style>
"""

JSX_TEMPLATE = """const [name] = () => {
    return <><h1>[name]</h1></>
}
export default [name]
"""

TSX_TEMPLATE = JSX_TEMPLATE


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def select_template(options: GenerationOptions) -> str:
    """
    Resolve the template body for the configured output kind.

    Args:
        options: Validated generation options.

    Returns:
        str: Template body still containing the '[name]' placeholder.

    Raises:
        OptionsValidationError: If the suffix is not vue, jsx or tsx.
    """
    suffix = normalize_suffix(options.file_suffix)

    if suffix == "vue":
        if options.is_vue3:
            script_lang = ' lang="ts"' if options.is_typescript else ""
            return _fill(VUE3_TEMPLATE, css=options.css_compiler, script_lang=script_lang)
        return _fill(VUE2_TEMPLATE, css=options.css_compiler)
    if suffix == "jsx":
        return JSX_TEMPLATE
    if suffix == "tsx":
        return TSX_TEMPLATE

    allowed = "|".join(FILE_SUFFIXES)
    raise OptionsValidationError(
        "fileSuffix",
        f"Unsupported file suffix '{options.file_suffix}', use one of ({allowed})",
    )


def render(template: str, display_name: str) -> str:
    """Replace every placeholder occurrence with the node display name."""
    return template.replace(PLACEHOLDER, display_name)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _fill(template: str, **values: str) -> str:
    # Vue 2 body holds literal braces, so no str.format
    out = template
    for key, value in values.items():
        out = out.replace("{" + key + "}", value)
    return out
