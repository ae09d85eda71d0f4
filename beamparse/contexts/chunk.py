from typing import List, Optional, Sequence

from beamparse.labels import END_OF_SENTENCE
from beamparse.utility import BoundedCache

__author__ = 'Beamparse Developers'
__all__ = [
    'ChunkContextGenerator',
]


class ChunkContextGenerator:
    """
    Generates the predictive context for the chunking phase, in which flat constituents are
    identified before parsing proper begins.

    If a cache size is given, contexts are cached for the sentence most recently seen. The cache
    is keyed on the identity of the words sequence, so the same sequence object must be passed for
    every position of a sentence to benefit from it.
    """

    def __init__(self, cache_size: int = 0):
        self._cache = BoundedCache(cache_size) if cache_size > 0 else None
        self._words_key = None

    @staticmethod
    def _chunk_and_pos_tag(offset: int, token: str, tag: str, chunk: Optional[str]) -> str:
        if offset < 0:
            return '%s=%s|%s|%s' % (offset, token, tag, chunk)
        return '%s=%s|%s' % (offset, token, tag)

    @staticmethod
    def _chunk_and_pos_tag_back_off(offset: int, tag: str, chunk: Optional[str]) -> str:
        if offset < 0:
            return '%s*=%s|%s' % (offset, tag, chunk)
        return '%s*=%s' % (offset, tag)

    def get_context(self, index: int, words: Sequence, tags: Sequence[str],
                    previous_labels: Sequence[str]) -> List[str]:
        """
        Return the context for chunking the token at the given index.

        Only the labels of tokens before the index are examined.
        """
        count = len(tags)

        def window(position):
            if 0 <= position < count:
                return str(words[position]), tags[position]
            return END_OF_SENTENCE, END_OF_SENTENCE

        def label(position):
            if position >= 0:
                return previous_labels[position]
            return END_OF_SENTENCE

        previous_previous_word, previous_previous_tag = window(index - 2)
        previous_word, previous_tag = window(index - 1)
        current_word, current_tag = window(index)
        next_word, next_tag = window(index + 1)
        next_next_word, next_next_tag = window(index + 2)
        previous_previous_label = label(index - 2)
        previous_label = label(index - 1)

        cache_key = (index, previous_previous_tag, previous_tag, current_tag, next_tag,
                     next_next_tag, previous_previous_label, previous_label)
        if self._cache is not None:
            if self._words_key is words:
                contexts = self._cache.get(cache_key)
                if contexts is not None:
                    return list(contexts)
            else:
                self._cache.clear()
                self._words_key = words

        p2 = self._chunk_and_pos_tag(-2, previous_previous_word, previous_previous_tag,
                                     previous_previous_label)
        p2b = self._chunk_and_pos_tag_back_off(-2, previous_previous_tag, previous_previous_label)
        p1 = self._chunk_and_pos_tag(-1, previous_word, previous_tag, previous_label)
        p1b = self._chunk_and_pos_tag_back_off(-1, previous_tag, previous_label)
        c0 = self._chunk_and_pos_tag(0, current_word, current_tag, None)
        c0b = self._chunk_and_pos_tag_back_off(0, current_tag, None)
        n1 = self._chunk_and_pos_tag(1, next_word, next_tag, None)
        n1b = self._chunk_and_pos_tag_back_off(1, next_tag, None)
        n2 = self._chunk_and_pos_tag(2, next_next_word, next_next_tag, None)
        n2b = self._chunk_and_pos_tag_back_off(2, next_next_tag, None)

        features = ['default', p2, p2b, p1, p1b, c0, c0b, n1, n1b, n2, n2b]

        # (-1,0)
        features.append(p1 + ',' + c0)
        features.append(p1b + ',' + c0)
        features.append(p1 + ',' + c0b)
        features.append(p1b + ',' + c0b)

        # (0,1)
        features.append(c0 + ',' + n1)
        features.append(c0b + ',' + n1)
        features.append(c0 + ',' + n1b)
        features.append(c0b + ',' + n1b)

        if self._cache is not None:
            self._cache.put(cache_key, tuple(features))
        return features
