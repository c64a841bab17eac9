# shadowgen/constants.py
from __future__ import annotations

GEN_CLASS = "Shadows"
GENERATOR_NAME = "shadowgen.generator.ShadowProviderGenerator"

# Sentinel for an absent version bound.
UNBOUNDED = -1

VERSION_QUERY_DEFAULT = "org.robolectric.RuntimeEnvironment.getApiLevel()"
EXTRACT_CALL_DEFAULT = "Shadow.extract"

DEFAULT_IMPORTS: tuple[str, ...] = (
    "java.util.HashMap",
    "java.util.Map",
    "javax.annotation.Generated",
    "org.robolectric.internal.ShadowProvider",
    "org.robolectric.shadow.api.Shadow",
)

# Split-model filenames (loaded in deterministic order).
MODEL_PART_FILES: tuple[str, ...] = (
    "00_imports.yaml",
    "10_shadows.yaml",
    "20_extra_shadows.yaml",
    "30_packages.yaml",
    # Per-area shadow lists are discovered under shadows/*.yaml
)
SHADOWS_PART_DIR = "shadows"
