"""Single-pass rhyme grouping over an ordered word list."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from transcript_annotator.utils.observability import get_logger

from .models import RhymeGroup
from .phonetic_lexicon import PhoneticLexicon

MIN_WORD_LENGTH = 2


class RhymeGrouper:
    """Cluster words that rhyme with a group's first member.

    Each group is represented by the first word ever added to it; a new word
    joins the first group (in creation order) whose representative it rhymes
    with.  Membership is never re-checked against the other members, so two
    non-representative members are not guaranteed to rhyme with each other.

    State describes the most recent :meth:`detect_rhymes` call only and is
    cleared at the start of every call.
    """

    def __init__(self, lexicon: PhoneticLexicon) -> None:
        self.lexicon = lexicon
        self._groups: Dict[int, RhymeGroup] = {}
        self._word_to_group: Dict[str, int] = {}
        self._next_group_id = 1
        self._logger = get_logger(__name__).bind(component="rhyme_grouper")

    def _reset(self) -> None:
        self._groups = {}
        self._word_to_group = {}
        self._next_group_id = 1

    def detect_rhymes(self, words: Sequence[str], language: str) -> Dict[int, int]:
        """Return ``{word_index: group_id}`` for every grouped word.

        Only the first occurrence of a word form receives an index entry;
        later repeats are skipped.  Use :meth:`expand_assignments` to cover
        every occurrence.
        """

        self._reset()
        index_to_group: Dict[int, int] = {}

        for index, raw_word in enumerate(words):
            word = (raw_word or "").lower()
            if len(word) < MIN_WORD_LENGTH or word in self._word_to_group:
                continue

            matched_group: Optional[int] = None
            for group_id, group in self._groups.items():
                if self.lexicon.rhymes(word, group.representative, language):
                    matched_group = group_id
                    break

            if matched_group is not None:
                self._groups[matched_group].members.append(word)
                self._word_to_group[word] = matched_group
                index_to_group[index] = matched_group
                continue

            if self.lexicon.get_pronunciation(word, language):
                group_id = self._next_group_id
                self._next_group_id += 1
                self._groups[group_id] = RhymeGroup(group_id=group_id, members=[word])
                self._word_to_group[word] = group_id
                index_to_group[index] = group_id

        solo_groups = [
            group_id for group_id, group in self._groups.items() if len(group.members) < 2
        ]
        for group_id in solo_groups:
            group = self._groups.pop(group_id)
            self._word_to_group.pop(group.representative, None)
        if solo_groups:
            pruned = set(solo_groups)
            index_to_group = {
                index: group_id
                for index, group_id in index_to_group.items()
                if group_id not in pruned
            }

        self._logger.debug(
            "Rhyme detection finished",
            context={
                "language": language,
                "words": len(words),
                "groups": len(self._groups),
                "pruned": len(solo_groups),
            },
        )
        return index_to_group

    def expand_assignments(self, words: Sequence[str]) -> Dict[int, int]:
        """Map every occurrence of a grouped word form in ``words`` to its group."""

        return {
            index: self._word_to_group[word.lower()]
            for index, word in enumerate(words)
            if word and word.lower() in self._word_to_group
        }

    # Lookups over the most recent run -------------------------------------
    @property
    def groups(self) -> List[RhymeGroup]:
        return [
            RhymeGroup(group_id=group.group_id, members=list(group.members))
            for group in self._groups.values()
        ]

    def get_rhyme_group_id(self, word: str) -> Optional[int]:
        return self._word_to_group.get((word or "").lower())

    def get_rhyming_words(self, word: str) -> List[str]:
        """Other members of ``word``'s group, or ``[]`` if it has none."""

        normalized = (word or "").lower()
        group_id = self._word_to_group.get(normalized)
        if group_id is None:
            return []
        group = self._groups.get(group_id)
        if group is None:
            return []
        return [member for member in group.members if member != normalized]

    def is_rhyming(self, word: str) -> bool:
        return (word or "").lower() in self._word_to_group


__all__ = ["RhymeGrouper", "MIN_WORD_LENGTH"]
