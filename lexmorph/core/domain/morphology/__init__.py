# lexmorph/core/domain/morphology/__init__.py
"""
Morphology services: marker identification, morph-type classification,
marker stripping, component building, indexed and scanned form matching.

    markers.py     marker sets derived from the morph-type table; identification
    classifier.py  morph-type resolution with ambiguity handling
    stripping.py   removal of identified markers
    components.py  MorphComponents / LexEntryComponents construction
    index.py       (writing system, text) hash index over stem forms
    matching.py    linear candidate filtering
"""

from lexmorph.core.domain.morphology.classifier import (
    AMBIGUITY_RESOLUTION,
    MajorAffixTypes,
    MorphClassification,
    MorphTypeClassifier,
    form_class_for,
)
from lexmorph.core.domain.morphology.components import MorphComponentBuilder
from lexmorph.core.domain.morphology.index import MorphIndex, MorphKey
from lexmorph.core.domain.morphology.markers import (
    AffixMarkers,
    MarkerSet,
    build_marker_set,
    identify_affix_markers,
)
from lexmorph.core.domain.morphology.matching import (
    find_matching_allomorph,
    get_matching_monomorphemic_morphs,
    get_matching_morphs,
    is_monomorphemic,
)
from lexmorph.core.domain.morphology.stripping import remove_markers, strip_affix_markers

__all__ = [
    "AMBIGUITY_RESOLUTION",
    "AffixMarkers",
    "MajorAffixTypes",
    "MarkerSet",
    "MorphClassification",
    "MorphComponentBuilder",
    "MorphIndex",
    "MorphKey",
    "MorphTypeClassifier",
    "build_marker_set",
    "find_matching_allomorph",
    "form_class_for",
    "get_matching_monomorphemic_morphs",
    "get_matching_morphs",
    "identify_affix_markers",
    "is_monomorphemic",
    "remove_markers",
    "strip_affix_markers",
]
