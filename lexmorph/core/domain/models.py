# lexmorph/core/domain/models.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums ---


class MorphTypeKind(str, Enum):
    """Stable ids of the well-known morph types."""
    BOUND_ROOT = "bound_root"
    BOUND_STEM = "bound_stem"
    CIRCUMFIX = "circumfix"
    CLITIC = "clitic"
    DISCONTIGUOUS_PHRASE = "discontiguous_phrase"
    ENCLITIC = "enclitic"
    INFIX = "infix"
    INFIXING_INTERFIX = "infixing_interfix"
    PARTICLE = "particle"
    PHRASE = "phrase"
    PREFIX = "prefix"
    PREFIXING_INTERFIX = "prefixing_interfix"
    PROCLITIC = "proclitic"
    ROOT = "root"
    SIMULFIX = "simulfix"
    STEM = "stem"
    SUFFIX = "suffix"
    SUFFIXING_INTERFIX = "suffixing_interfix"
    SUPRAFIX = "suprafix"


class FormClass(str, Enum):
    """The two storage classes a classified form resolves into."""
    AFFIX = "affix"
    STEM = "stem"


# Clitics may stand alone, without the markers their type declares.
CLITIC_KINDS = frozenset({MorphTypeKind.ENCLITIC.value, MorphTypeKind.PROCLITIC.value})

# Bound types are never monomorphemic matches.
BOUND_KINDS = frozenset({MorphTypeKind.BOUND_ROOT.value, MorphTypeKind.BOUND_STEM.value})


# --- Value Objects ---


class MorphType(BaseModel):
    """
    A category of morpheme together with its marker convention.

    `prefix` is the marker written *before* the form (e.g. "-" for a suffix
    such as "-ing"), `postfix` the marker written *after* it (e.g. "-" for a
    prefix such as "un-").
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable identity, e.g. 'suffix'")
    name: str = ""
    prefix: Optional[str] = None
    postfix: Optional[str] = None
    is_affix_type: bool = False
    is_prefixish: bool = False
    is_suffixish: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _plain_id(cls, value):
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("prefix", "postfix", mode="before")
    @classmethod
    def _empty_marker_is_none(cls, value):
        if value == "":
            return None
        return value

    @property
    def markers(self) -> Tuple[Optional[str], Optional[str]]:
        return self.prefix, self.postfix

    def is_kind(self, kind: "MorphTypeKind | str") -> bool:
        if isinstance(kind, Enum):
            kind = kind.value
        return self.id == kind


@dataclass(frozen=True, slots=True)
class RichText:
    """
    Text tagged with the writing system it is written in.

    Equality and hashing are structural over (ws, text), so instances are
    safe dictionary keys.
    """

    text: str
    ws: int

    @property
    def key(self) -> Tuple[int, str]:
        return self.ws, self.text

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


# --- Entities ---


@dataclass(eq=False)
class MorphForm:
    """
    A stored morph form (allomorph).

    `form` maps writing-system ids to the form's text in that writing system.
    Concrete storage classes are `StemAllomorph` and `AffixAllomorph`.
    """

    form_class: ClassVar[FormClass]

    form: Dict[int, str] = field(default_factory=dict)
    morph_type: Optional[MorphType] = None
    owner: Optional["LexEntry"] = field(default=None, repr=False)

    def get_form(self, ws: int) -> Optional[RichText]:
        text = self.form.get(ws)
        if text is None:
            return None
        return RichText(text, ws)

    def set_form(self, ws: int, text: str) -> None:
        self.form[ws] = text

    def alternatives(self) -> Iterator[RichText]:
        """Yield the form in every writing system it has text for."""
        for ws, text in self.form.items():
            yield RichText(text, ws)


@dataclass(eq=False)
class StemAllomorph(MorphForm):
    form_class: ClassVar[FormClass] = FormClass.STEM


@dataclass(eq=False)
class AffixAllomorph(MorphForm):
    form_class: ClassVar[FormClass] = FormClass.AFFIX


FORM_CLASS_TYPES: Dict[FormClass, Type[MorphForm]] = {
    FormClass.STEM: StemAllomorph,
    FormClass.AFFIX: AffixAllomorph,
}


def create_form(form_class: FormClass | str) -> MorphForm:
    """Instantiate the storage object for a form class."""
    return FORM_CLASS_TYPES[FormClass(form_class)]()


@dataclass(eq=False)
class LexEntry:
    """
    A lexical entry owning morph forms: one lexeme form plus an ordered
    list of alternate forms.
    """

    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    lexeme_form: Optional[MorphForm] = None
    alternate_forms: List[MorphForm] = field(default_factory=list)
    is_valid: bool = True

    def add_allomorph(self, allomorph: MorphForm) -> MorphForm:
        """
        Attach a form: it becomes the lexeme form if the entry has none yet,
        otherwise it is appended to the alternate forms.
        """
        if self.lexeme_form is None:
            self.lexeme_form = allomorph
        else:
            self.alternate_forms.append(allomorph)
        allomorph.owner = self
        return allomorph

    def allomorphs(self) -> Iterator[MorphForm]:
        if self.lexeme_form is not None:
            yield self.lexeme_form
        yield from self.alternate_forms

    def delete(self) -> None:
        """Mark the entry as no longer live; its forms become orphans."""
        self.is_valid = False


# --- Results ---


@dataclass(slots=True)
class MorphComponents:
    """Breakdown of a marked form: its type, markers and unmarked text."""

    morph_type: MorphType
    prefix: Optional[str] = None
    postfix: Optional[str] = None
    form: Optional[RichText] = None


@dataclass(slots=True)
class LexEntryComponents:
    """What is needed to create a new entry from a marked form."""

    morph_type: MorphType
    lexeme_form_alternatives: List[RichText] = field(default_factory=list)
