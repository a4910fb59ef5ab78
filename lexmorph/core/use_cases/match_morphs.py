# lexmorph/core/use_cases/match_morphs.py
from typing import List, MutableMapping, Optional

import structlog

from lexmorph.core.domain.models import FormClass, MorphForm, RichText
from lexmorph.core.domain.morphology.index import MorphIndex
from lexmorph.core.domain.morphology.matching import (
    get_matching_monomorphemic_morphs,
    get_matching_morphs,
)
from lexmorph.core.ports.form_repository import IFormRepository
from lexmorph.shared.cache import VersionedCache
from lexmorph.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class MatchMorphs:
    """
    Use Case: Finds stored morph forms matching query forms.

    Two read paths:
    - scans (`matching_morphs`, `matching_monomorphemic_morphs`) filter the
      live repository and are meant for targeted lookups;
    - `collect_monomorphemic_morphs` resolves a whole batch through the
      MorphIndex, built once per repository version.
    """

    def __init__(self, repository: IFormRepository, cache_enabled: bool = True):
        self.repository = repository
        self._index: VersionedCache[MorphIndex] = VersionedCache(
            lambda: MorphIndex.build_monomorphemic(self.repository.all_forms()),
            lambda: self.repository.version,
            name="morph_index",
            enabled=cache_enabled,
        )

    @property
    def index(self) -> MorphIndex:
        return self._index.get()

    def matching_morphs(
        self,
        prefix_marker: Optional[str],
        morph_form: RichText,
        postfix_marker: Optional[str],
        form_class: Optional[FormClass] = None,
    ) -> List[MorphForm]:
        return list(
            get_matching_morphs(self.repository.all_forms(), prefix_marker, morph_form, postfix_marker, form_class)
        )

    def matching_monomorphemic_morphs(self, morph_form: RichText) -> List[MorphForm]:
        return list(get_matching_monomorphemic_morphs(self.repository.all_forms(), morph_form))

    def collect_monomorphemic_morphs(self, collector: MutableMapping[RichText, Optional[MorphForm]]) -> int:
        """
        Fill `collector` (query form -> slot) with matching stem allomorphs.
        Unmatched slots are left untouched.

        Returns:
            The number of matched query forms.
        """
        with tracer.start_as_current_span("use_case.collect_monomorphemic_morphs") as span:
            span.set_attribute("lexmorph.queries", len(collector))
            hits = self.index.resolve(collector)
            span.set_attribute("lexmorph.hits", hits)
            logger.debug("monomorphemic_morphs_collected", queries=len(collector), hits=hits)
            return hits
