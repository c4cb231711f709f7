import pytest

from transcript_annotator.core import LexiconNotLoadedError, PhoneticLexicon, RhymeGrouper


@pytest.fixture
def grouper(phonetic_lexicon):
    return RhymeGrouper(phonetic_lexicon)


def test_groups_rhyming_words_under_one_id(grouper):
    words = ["cat", "dog", "hat", "fish", "rat", "bird"]

    assignments = grouper.detect_rhymes(words, "en_us")

    assert assignments == {0: 1, 2: 1, 4: 1}
    groups = grouper.groups
    assert len(groups) == 1
    assert groups[0].group_id == 1
    assert groups[0].members == ["cat", "hat", "rat"]
    assert groups[0].representative == "cat"


def test_single_member_groups_are_pruned_without_renumbering(grouper):
    assignments = grouper.detect_rhymes(["dog", "cat", "hat"], "en_us")

    assert assignments == {1: 2, 2: 2}
    assert [group.group_id for group in grouper.groups] == [2]
    assert grouper.get_rhyme_group_id("dog") is None


def test_multiple_groups_keep_creation_order(grouper):
    words = ["cat", "light", "hat", "night"]

    assignments = grouper.detect_rhymes(words, "en_us")

    assert assignments == {0: 1, 1: 2, 2: 1, 3: 2}
    assert [group.members for group in grouper.groups] == [["cat", "hat"], ["light", "night"]]


def test_only_first_occurrence_is_assigned(grouper):
    words = ["cat", "hat", "cat"]

    assignments = grouper.detect_rhymes(words, "en_us")

    assert assignments == {0: 1, 1: 1}
    assert grouper.groups[0].members == ["cat", "hat"]
    assert grouper.expand_assignments(words) == {0: 1, 1: 1, 2: 1}


def test_repeated_word_alone_does_not_form_group(grouper):
    assert grouper.detect_rhymes(["cat", "cat", "dog"], "en_us") == {}
    assert grouper.groups == []


def test_words_are_lowercased(grouper):
    assignments = grouper.detect_rhymes(["Cat", "HAT"], "en_us")

    assert assignments == {0: 1, 1: 1}
    assert grouper.groups[0].members == ["cat", "hat"]
    assert grouper.is_rhyming("CAT")


def test_short_and_unknown_words_are_skipped(grouper):
    assignments = grouper.detect_rhymes(["a", "xyzzy", "cat", "plugh", "hat"], "en_us")

    assert assignments == {2: 1, 4: 1}


def test_empty_input(grouper):
    assert grouper.detect_rhymes([], "en_us") == {}
    assert grouper.groups == []


def test_state_resets_between_runs(grouper):
    grouper.detect_rhymes(["cat", "hat"], "en_us")
    assignments = grouper.detect_rhymes(["light", "night"], "en_us")

    assert assignments == {0: 1, 1: 1}
    assert grouper.get_rhyme_group_id("cat") is None
    assert [group.members for group in grouper.groups] == [["light", "night"]]


def test_rhyming_word_lookups(grouper):
    grouper.detect_rhymes(["cat", "hat", "rat", "dog"], "en_us")

    assert grouper.get_rhyme_group_id("hat") == 1
    assert grouper.get_rhyming_words("hat") == ["cat", "rat"]
    assert grouper.get_rhyming_words("dog") == []
    assert not grouper.is_rhyming("dog")


def test_groups_are_copies(grouper):
    grouper.detect_rhymes(["cat", "hat"], "en_us")
    grouper.groups[0].members.append("dog")

    assert grouper.groups[0].members == ["cat", "hat"]


class SlantRhymeLexicon(PhoneticLexicon):
    """Lexicon whose rhyme pairs are listed explicitly and need not be transitive."""

    def __init__(self, pronunciations, pairs):
        super().__init__({"en_us": pronunciations})
        self.pairs = {frozenset(pair) for pair in pairs}

    def rhymes(self, word1, word2, language):
        return frozenset((word1, word2)) in self.pairs


def test_word_joins_earliest_matching_group():
    lexicon = SlantRhymeLexicon(
        {"cat": "K AE1 T", "hat": "HH AE1 T", "that": "DH AE1 T"},
        pairs=[("cat", "that"), ("hat", "that")],
    )
    grouper = RhymeGrouper(lexicon)

    assignments = grouper.detect_rhymes(["cat", "hat", "that"], "en_us")

    assert assignments == {0: 1, 2: 1}
    (group,) = grouper.groups
    assert group.group_id == 1
    assert group.members == ["cat", "that"]
    assert group.representative == "cat"


def test_members_are_not_rechecked_against_each_other():
    lexicon = SlantRhymeLexicon(
        {"cat": "K AE1 T", "that": "DH AE1 T", "chat": "CH AE1 T"},
        pairs=[("cat", "that"), ("cat", "chat")],
    )
    grouper = RhymeGrouper(lexicon)

    assignments = grouper.detect_rhymes(["cat", "that", "chat"], "en_us")

    assert assignments == {0: 1, 1: 1, 2: 1}
    assert not lexicon.rhymes("that", "chat", "en_us")
    assert grouper.groups[0].representative == "cat"


def test_portuguese_grouping(phonetic_lexicon):
    grouper = RhymeGrouper(phonetic_lexicon)

    assert grouper.detect_rhymes(["amor", "mar", "flor"], "pt_PT") == {0: 1, 2: 1}


def test_unloaded_language_raises(grouper):
    with pytest.raises(LexiconNotLoadedError):
        grouper.detect_rhymes(["cat", "hat"], "en_uk")
