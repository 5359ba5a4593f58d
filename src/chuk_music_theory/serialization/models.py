"""
Document models - the encoded form of every core value.

Each core type has a pydantic document that mirrors it field for field,
tagged with a `type` discriminator so that any encoded value is
self-describing. Documents validate structure; the core types validate
musical invariants when the document is turned back into a value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from chuk_music_theory.constants import (
    OCTAVE_MAX,
    OCTAVE_MIN,
    SEMITONES_MAX,
    SEMITONES_MIN,
    ErrorMessages,
)
from chuk_music_theory.core.chord import (
    Chord,
    ChordClass,
    ChordPattern,
    RootedChord,
    RootedChordClass,
)
from chuk_music_theory.core.note import Note
from chuk_music_theory.core.pitch import Interval, Pitch, PitchClass
from chuk_music_theory.core.rhythm import (
    BeatAssignment,
    Duration,
    Metre,
    Ratio,
    Rhythm,
    Tempo,
    TimeSignature,
)
from chuk_music_theory.core.timeline import AnchoredTimeline, Marker, Timeline

PitchClassValue = Annotated[int, Field(ge=0, le=11)]
PositiveInt = Annotated[int, Field(gt=0)]

# JSON scalars stored as-is inside timelines
_PRIMITIVES = (str, int, float, bool, type(None))


class BaseDocument(BaseModel, ABC):
    """
    Common configuration for all documents.

    Every document converts both ways: from_value builds the document from
    a core value, to_value rebuilds the core value (raising the core error
    if a musical invariant is broken).
    """

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    @abstractmethod
    def from_value(cls, value: Any) -> BaseDocument:
        """Build the document for a core value."""

    @abstractmethod
    def to_value(self) -> Any:
        """Rebuild the core value."""


class PitchClassDocument(BaseDocument):
    """A pitch class on its own."""

    type: Literal["pitch_class"] = "pitch_class"
    value: PitchClassValue = Field(..., description="Pitch class value (C=0 .. B=11)")

    @classmethod
    def from_value(cls, value: PitchClass) -> PitchClassDocument:
        return cls(value=value.value)

    def to_value(self) -> PitchClass:
        return PitchClass(self.value)


class PitchDocument(BaseDocument):
    """An absolute pitch."""

    type: Literal["pitch"] = "pitch"
    pitch_class: PitchClassValue = Field(..., description="Pitch class value (C=0 .. B=11)")
    octave: int = Field(..., ge=OCTAVE_MIN, le=OCTAVE_MAX, description="Signed octave number")

    @classmethod
    def from_value(cls, value: Pitch) -> PitchDocument:
        return cls(pitch_class=value.pitch_class.value, octave=value.octave)

    def to_value(self) -> Pitch:
        return Pitch(PitchClass(self.pitch_class), self.octave)


class IntervalDocument(BaseDocument):
    """A signed interval in semitones."""

    type: Literal["interval"] = "interval"
    semitones: int = Field(..., ge=SEMITONES_MIN, le=SEMITONES_MAX)

    @classmethod
    def from_value(cls, value: Interval) -> IntervalDocument:
        return cls(semitones=value.semitones)

    def to_value(self) -> Interval:
        return Interval(self.semitones)


class RatioDocument(BaseDocument):
    """A ratio, parts kept as written."""

    type: Literal["ratio"] = "ratio"
    numerator: PositiveInt
    denominator: PositiveInt

    @classmethod
    def from_value(cls, value: Ratio) -> RatioDocument:
        return cls(numerator=value.numerator, denominator=value.denominator)

    def to_value(self) -> Ratio:
        return Ratio(self.numerator, self.denominator)


class DurationDocument(BaseDocument):
    """A duration in whole notes, parts kept as written."""

    type: Literal["duration"] = "duration"
    numerator: PositiveInt
    denominator: PositiveInt

    @classmethod
    def from_value(cls, value: Duration) -> DurationDocument:
        return cls(numerator=value.numerator, denominator=value.denominator)

    def to_value(self) -> Duration:
        return Duration(self.numerator, self.denominator)


class TimeSignatureDocument(BaseDocument):
    """A time signature."""

    type: Literal["time_signature"] = "time_signature"
    numerator: PositiveInt
    denominator: PositiveInt

    @classmethod
    def from_value(cls, value: TimeSignature) -> TimeSignatureDocument:
        return cls(numerator=value.numerator, denominator=value.denominator)

    def to_value(self) -> TimeSignature:
        return TimeSignature(self.numerator, self.denominator)


class TempoDocument(BaseDocument):
    """A tempo in beats per minute."""

    type: Literal["tempo"] = "tempo"
    bpm: float = Field(..., gt=0, allow_inf_nan=False)

    @classmethod
    def from_value(cls, value: Tempo) -> TempoDocument:
        return cls(bpm=value.bpm)

    def to_value(self) -> Tempo:
        return Tempo(self.bpm)


class BeatAssignmentDocument(BaseDocument):
    """The duration that counts as one beat."""

    type: Literal["beat_assignment"] = "beat_assignment"
    duration: DurationDocument

    @classmethod
    def from_value(cls, value: BeatAssignment) -> BeatAssignmentDocument:
        return cls(duration=DurationDocument.from_value(value.duration))

    def to_value(self) -> BeatAssignment:
        return BeatAssignment(self.duration.to_value())


class RhythmDocument(BaseDocument):
    """Tempo plus beat assignment."""

    type: Literal["rhythm"] = "rhythm"
    tempo: TempoDocument
    beat_assignment: BeatAssignmentDocument

    @classmethod
    def from_value(cls, value: Rhythm) -> RhythmDocument:
        return cls(
            tempo=TempoDocument.from_value(value.tempo),
            beat_assignment=BeatAssignmentDocument.from_value(value.beat_assignment),
        )

    def to_value(self) -> Rhythm:
        return Rhythm(self.tempo.to_value(), self.beat_assignment.to_value())


class MetreDocument(BaseDocument):
    """Rhythm plus time signature."""

    type: Literal["metre"] = "metre"
    rhythm: RhythmDocument
    time_signature: TimeSignatureDocument

    @classmethod
    def from_value(cls, value: Metre) -> MetreDocument:
        return cls(
            rhythm=RhythmDocument.from_value(value.rhythm),
            time_signature=TimeSignatureDocument.from_value(value.time_signature),
        )

    def to_value(self) -> Metre:
        return Metre(self.rhythm.to_value(), self.time_signature.to_value())


class NoteDocument(BaseDocument):
    """A pitch held for a duration."""

    type: Literal["note"] = "note"
    pitch: PitchDocument
    duration: DurationDocument

    @classmethod
    def from_value(cls, value: Note) -> NoteDocument:
        return cls(
            pitch=PitchDocument.from_value(value.pitch),
            duration=DurationDocument.from_value(value.duration),
        )

    def to_value(self) -> Note:
        return Note(self.pitch.to_value(), self.duration.to_value())


class ChordClassDocument(BaseDocument):
    """Pitch classes, written in ascending order."""

    type: Literal["chord_class"] = "chord_class"
    pitch_classes: list[PitchClassValue] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: ChordClass) -> ChordClassDocument:
        return cls(pitch_classes=[pc.value for pc in value.ordered()])

    def to_value(self) -> ChordClass:
        return ChordClass(frozenset(PitchClass(pc) for pc in self.pitch_classes))


class RootedChordClassDocument(BaseDocument):
    """A chord class and its root."""

    type: Literal["rooted_chord_class"] = "rooted_chord_class"
    chord_class: ChordClassDocument
    root: PitchClassValue

    @classmethod
    def from_value(cls, value: RootedChordClass) -> RootedChordClassDocument:
        return cls(
            chord_class=ChordClassDocument.from_value(value.chord_class), root=value.root.value
        )

    def to_value(self) -> RootedChordClass:
        return RootedChordClass(self.chord_class.to_value(), PitchClass(self.root))


class ChordDocument(BaseDocument):
    """Pitches, written lowest first."""

    type: Literal["chord"] = "chord"
    pitches: list[PitchDocument] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: Chord) -> ChordDocument:
        return cls(pitches=[PitchDocument.from_value(p) for p in value.ordered()])

    def to_value(self) -> Chord:
        return Chord(frozenset(p.to_value() for p in self.pitches))


class RootedChordDocument(BaseDocument):
    """A chord and its root pitch."""

    type: Literal["rooted_chord"] = "rooted_chord"
    chord: ChordDocument
    root: PitchDocument

    @classmethod
    def from_value(cls, value: RootedChord) -> RootedChordDocument:
        return cls(
            chord=ChordDocument.from_value(value.chord), root=PitchDocument.from_value(value.root)
        )

    def to_value(self) -> RootedChord:
        return RootedChord(self.chord.to_value(), self.root.to_value())


class ChordPatternDocument(BaseDocument):
    """Signed semitone offsets from the root."""

    type: Literal["chord_pattern"] = "chord_pattern"
    intervals: list[int] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: ChordPattern) -> ChordPatternDocument:
        return cls(intervals=list(value.semitones))

    def to_value(self) -> ChordPattern:
        return ChordPattern(self.intervals)


class MarkerDocument(BaseDocument):
    """A named position."""

    type: Literal["marker"] = "marker"
    name: str
    position: DurationDocument

    @classmethod
    def from_value(cls, value: Marker) -> MarkerDocument:
        return cls(name=value.name, position=DurationDocument.from_value(value.position))

    def to_value(self) -> Marker:
        return Marker(self.name, self.position.to_value())


class TimelineEntryDocument(BaseModel):
    """One timeline entry; the value is an encoded document or a JSON scalar."""

    position: DurationDocument
    value: Any = None

    model_config = {"frozen": True, "extra": "forbid"}


class TimelineDocument(BaseDocument):
    """Entries in ascending position order."""

    type: Literal["timeline"] = "timeline"
    entries: list[TimelineEntryDocument] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: Timeline[Any]) -> TimelineDocument:
        return cls(
            entries=[
                TimelineEntryDocument(
                    position=DurationDocument.from_value(position), value=encode_value(item)
                )
                for position, item in value
            ]
        )

    def to_value(self) -> Timeline[Any]:
        return Timeline(
            tuple((entry.position.to_value(), decode_value(entry.value)) for entry in self.entries)
        )


class AnchoredTimelineDocument(BaseDocument):
    """A timeline and the rhythm it is read through."""

    type: Literal["anchored_timeline"] = "anchored_timeline"
    timeline: TimelineDocument
    rhythm: RhythmDocument

    @classmethod
    def from_value(cls, value: AnchoredTimeline[Any]) -> AnchoredTimelineDocument:
        return cls(
            timeline=TimelineDocument.from_value(value.timeline),
            rhythm=RhythmDocument.from_value(value.rhythm),
        )

    def to_value(self) -> AnchoredTimeline[Any]:
        return AnchoredTimeline(self.timeline.to_value(), self.rhythm.to_value())


Document = Annotated[
    PitchClassDocument
    | PitchDocument
    | IntervalDocument
    | RatioDocument
    | DurationDocument
    | TimeSignatureDocument
    | TempoDocument
    | BeatAssignmentDocument
    | RhythmDocument
    | MetreDocument
    | NoteDocument
    | ChordClassDocument
    | RootedChordClassDocument
    | ChordDocument
    | RootedChordDocument
    | ChordPatternDocument
    | MarkerDocument
    | TimelineDocument
    | AnchoredTimelineDocument,
    Field(discriminator="type"),
]

DOCUMENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(Document)

# Core type -> document class
DOCUMENT_TYPES: dict[type, type[BaseDocument]] = {
    PitchClass: PitchClassDocument,
    Pitch: PitchDocument,
    Interval: IntervalDocument,
    Ratio: RatioDocument,
    Duration: DurationDocument,
    TimeSignature: TimeSignatureDocument,
    Tempo: TempoDocument,
    BeatAssignment: BeatAssignmentDocument,
    Rhythm: RhythmDocument,
    Metre: MetreDocument,
    Note: NoteDocument,
    ChordClass: ChordClassDocument,
    RootedChordClass: RootedChordClassDocument,
    Chord: ChordDocument,
    RootedChord: RootedChordDocument,
    ChordPattern: ChordPatternDocument,
    Marker: MarkerDocument,
    Timeline: TimelineDocument,
    AnchoredTimeline: AnchoredTimelineDocument,
}


def document_for(value: Any) -> BaseDocument:
    """
    Build the document for a core value.

    Raises:
        TypeError: If the value's type has no document
    """
    doc_cls = DOCUMENT_TYPES.get(type(value))
    if doc_cls is None:
        raise TypeError(ErrorMessages.UNSUPPORTED_VALUE.format(type=type(value).__name__))
    return doc_cls.from_value(value)


def encode_value(value: Any) -> Any:
    """Encode a timeline value: core values become dicts, JSON scalars pass through."""
    # IntEnum members are ints but must keep their type
    if isinstance(value, _PRIMITIVES) and not isinstance(value, Enum):
        return value
    return document_for(value).model_dump(mode="json")


def decode_value(data: Any) -> Any:
    """Inverse of encode_value."""
    if isinstance(data, dict):
        return DOCUMENT_ADAPTER.validate_python(data).to_value()
    return data
