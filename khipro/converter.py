"""Khipro transducer: greedy longest-match conversion driven by a 4-state machine"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional, Tuple

from .lexer import Lexer
from .tables import RULE_TABLES, RuleTable, RuleTableError, TokenGroup

logger = logging.getLogger(__name__)

# Hasanta, joins a subjoined consonant to the one before it
VIRAMA = "\u09cd"


class State(Enum):
    """What the converter has just written, which decides what may come next"""

    INIT = "init"  # start of input, after punctuation or a separator
    AFTER_VOWEL = "after_vowel"
    AFTER_REPH = "after_reph"
    AFTER_CONSONANT = "after_consonant"


# Eligible groups per state, highest priority first
STATE_GROUPS: Mapping[State, Tuple[TokenGroup, ...]] = MappingProxyType(
    {
        State.INIT: (
            TokenGroup.DIACRITIC,
            TokenGroup.VOWEL,
            TokenGroup.SEPARATOR,
            TokenGroup.DIGIT,
            TokenGroup.SENTENCE_PUNCT,
            TokenGroup.REPH,
            TokenGroup.CLUSTER,
            TokenGroup.CONSONANT,
        ),
        State.AFTER_VOWEL: (
            TokenGroup.DIACRITIC,
            TokenGroup.VOWEL,
            TokenGroup.SENTENCE_PUNCT,
            TokenGroup.SEPARATOR,
            TokenGroup.DIGIT,
            TokenGroup.REPH,
            TokenGroup.CLUSTER,
            TokenGroup.CONSONANT,
        ),
        State.AFTER_REPH: (
            TokenGroup.SEPARATOR,
            TokenGroup.VOWEL_CLUSTER_FORM,
            TokenGroup.CLUSTER,
            TokenGroup.CONSONANT,
            TokenGroup.VOWEL_SIGN,
        ),
        State.AFTER_CONSONANT: (
            TokenGroup.DIACRITIC,
            TokenGroup.SEPARATOR,
            TokenGroup.DIGIT,
            TokenGroup.SENTENCE_PUNCT,
            TokenGroup.VOWEL_SIGN,
            TokenGroup.CLUSTER,
            TokenGroup.SUBJOIN,
            TokenGroup.CONSONANT,
        ),
    }
)

_FROM_WORD_START = MappingProxyType(
    {
        TokenGroup.DIACRITIC: State.AFTER_VOWEL,
        TokenGroup.VOWEL: State.AFTER_VOWEL,
        TokenGroup.SEPARATOR: State.INIT,
        TokenGroup.DIGIT: State.INIT,
        TokenGroup.SENTENCE_PUNCT: State.INIT,
        TokenGroup.REPH: State.AFTER_REPH,
        TokenGroup.CLUSTER: State.AFTER_CONSONANT,
        TokenGroup.CONSONANT: State.AFTER_CONSONANT,
    }
)

TRANSITIONS: Mapping[State, Mapping[TokenGroup, State]] = MappingProxyType(
    {
        State.INIT: _FROM_WORD_START,
        State.AFTER_VOWEL: _FROM_WORD_START,
        State.AFTER_REPH: MappingProxyType(
            {
                TokenGroup.SEPARATOR: State.INIT,
                TokenGroup.VOWEL_CLUSTER_FORM: State.AFTER_VOWEL,
                TokenGroup.CLUSTER: State.AFTER_CONSONANT,
                TokenGroup.CONSONANT: State.AFTER_CONSONANT,
                TokenGroup.VOWEL_SIGN: State.AFTER_VOWEL,
            }
        ),
        State.AFTER_CONSONANT: MappingProxyType(
            {
                TokenGroup.DIACRITIC: State.AFTER_VOWEL,
                TokenGroup.VOWEL_SIGN: State.AFTER_VOWEL,
                TokenGroup.SEPARATOR: State.INIT,
                TokenGroup.DIGIT: State.INIT,
                TokenGroup.SENTENCE_PUNCT: State.INIT,
                TokenGroup.CLUSTER: State.AFTER_CONSONANT,
                TokenGroup.SUBJOIN: State.AFTER_CONSONANT,
                TokenGroup.CONSONANT: State.AFTER_CONSONANT,
            }
        ),
    }
)


@dataclass(frozen=True)
class Match:
    """One token found by the matcher"""

    group: TokenGroup
    key: str  # the ASCII input consumed
    value: str  # the Bengali output from the group's table

    def __len__(self) -> int:
        return len(self.key)


class _KhiproTransliterator:
    """Banglish to Bengali transliterator over the khipro rule tables"""

    def __init__(
        self,
        tables: Mapping[TokenGroup, RuleTable] = RULE_TABLES,
        state_groups: Mapping[State, Tuple[TokenGroup, ...]] = STATE_GROUPS,
        transitions: Mapping[State, Mapping[TokenGroup, State]] = TRANSITIONS,
    ):
        self.tables = tables
        self.state_groups = state_groups
        self.transitions = transitions
        self._check_state_model()

        # Longest key any eligible group can match, per state
        self.max_key_lengths = {
            state: max(tables[group].max_key_length for group in groups)
            for state, groups in state_groups.items()
        }

    def _check_state_model(self) -> None:
        """Fail fast unless every state lists known groups with a transition each"""
        for state in State:
            groups = self.state_groups.get(state)
            if not groups:
                raise RuleTableError(f"No eligible groups for state {state.value}")
            for group in groups:
                if group not in self.tables:
                    raise RuleTableError(
                        f"State {state.value} lists {group.value}, which has no table"
                    )
                if group not in self.transitions.get(state, {}):
                    raise RuleTableError(
                        f"No transition from {state.value} on {group.value}"
                    )

    def __call__(self, text: str) -> str:
        """Convert Banglish text to Bengali"""
        if not text:
            return ""

        lexer = Lexer(text)
        state = State.INIT
        result = []

        while not lexer.at_end():
            match = self.find_best_match(state, text, lexer.pos)

            if match is None:
                # Unknown input is copied through and the machine starts over
                logger.debug(
                    "No rule for %r at offset %d, passing it through",
                    lexer.peek(),
                    lexer.pos,
                )
                result.append(lexer.eat())
                state = State.INIT
                continue

            if match.group is TokenGroup.SUBJOIN and state is State.AFTER_CONSONANT:
                result.append(VIRAMA)
            result.append(match.value)

            lexer.eat(len(match))
            state = self.next_state(state, match.group)

        return "".join(result)

    def find_best_match(
        self, state: State, text: str, offset: int = 0
    ) -> Optional[Match]:
        """Longest token at offset among the groups eligible in state.

        Length always wins. Group priority only breaks ties between keys of
        the same length.
        """
        groups = self.state_groups[state]
        lexer = Lexer(text, offset)
        longest = min(self.max_key_lengths[state], lexer.remaining_length())

        for length in range(longest, 0, -1):
            chunk = lexer.peek_chunk(length)
            for group in groups:
                value = self.tables[group].get(chunk)
                if value is not None:
                    return Match(group, chunk, value)
        return None

    def next_state(self, state: State, group: TokenGroup) -> State:
        """State after consuming a token of group; unmapped pairs stay put"""
        return self.transitions[state].get(group, state)


class PreviewSequence(Sequence):
    """Conversions of every prefix of a text, one per keystroke.

    Element k is the conversion of text[:k + 1], computed from scratch on
    each access. Nothing is cached or carried between elements, so the
    sequence can be iterated any number of times, indexed in any order, or
    dropped half way without cleanup.
    """

    def __init__(self, text: str, converter: Optional[Callable[[str], str]] = None):
        self.text = text
        self._convert = converter or convert

    def __len__(self) -> int:
        return len(self.text)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]

        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("preview index out of range")
        return self._convert(self.text[: index + 1])

    def __iter__(self) -> Iterator[str]:
        for end in range(1, len(self.text) + 1):
            yield self._convert(self.text[:end])

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (typed prefix, converted prefix) pairs, as a live typing trace"""
        for end in range(1, len(self.text) + 1):
            prefix = self.text[:end]
            yield prefix, self._convert(prefix)

    def __repr__(self) -> str:
        return f"PreviewSequence({self.text!r})"


# Global instance
_transliterator = _KhiproTransliterator()


def find_best_match(state: State, text: str, offset: int = 0) -> Optional[Match]:
    """Best next token at offset for the default khipro tables"""
    return _transliterator.find_best_match(state, text, offset)


def next_state(state: State, group: TokenGroup) -> State:
    return _transliterator.next_state(state, group)


def convert(text: str) -> str:
    """
    Convert Banglish (khipro scheme) to Bengali script.

    Never raises: characters without a rule are copied to the output
    unchanged.

    Args:
        text: Romanized input

    Returns:
        Bengali text

    Examples:
        >>> convert('ami')
        'আমি'
        >>> convert('bangla')
        'বাংলা'
        >>> convert('a!')
        'আ!'
    """
    return _transliterator(text)


def preview_sequence(text: str) -> PreviewSequence:
    """
    Live preview of text being typed: one conversion per prefix.

    Examples:
        >>> list(preview_sequence('ab'))
        ['আ', 'আব']
    """
    return PreviewSequence(text)
