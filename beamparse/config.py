# -*- coding: utf-8 -*-

"""
Parser configuration
"""

import configparser
import os
from typing import Any, Mapping

from beamparse.head_rules import EnglishHeadRules
from beamparse.labels import DEFAULT_ADVANCE_PERCENTAGE, DEFAULT_BEAM_SIZE

__author__ = 'Beamparse Developers'
__all__ = [
    'ParserConfig',
]


class ParserConfig:
    """Parser configuration, read from an INI file."""

    DEFAULT_CHUNKER_BEAM_SIZE = 10
    DEFAULT_CHUNKER_CACHE_SIZE = 10

    def __init__(self, config_file_path: str, defaults: Mapping[str, Any] = None):
        config_file_path = os.path.abspath(os.path.expanduser(config_file_path))

        if not os.path.isfile(config_file_path):
            raise FileNotFoundError(config_file_path)

        self._config_file_path = config_file_path

        data_folder = os.path.dirname(config_file_path)

        if defaults is None:
            defaults = {}
        else:
            defaults = dict(defaults)

        config_parser = configparser.ConfigParser(defaults)
        config_parser.read(self._config_file_path, encoding='utf-8')

        # Parser
        self._beam_size = config_parser.getint('Parser', 'Beam Size',
                                               fallback=DEFAULT_BEAM_SIZE)
        self._advance_percentage = config_parser.getfloat('Parser', 'Advance Percentage',
                                                          fallback=DEFAULT_ADVANCE_PERCENTAGE)
        self._derivation_logging = config_parser.getboolean('Parser', 'Derivation Logging',
                                                            fallback=False)
        self._head_rules_file = os.path.join(data_folder,
                                             config_parser.get('Parser', 'Head Rules File').strip())

        # Chunker
        self._chunker_beam_size = config_parser.getint('Chunker', 'Beam Size',
                                                       fallback=self.DEFAULT_CHUNKER_BEAM_SIZE)
        self._chunker_cache_size = config_parser.getint('Chunker', 'Cache Size',
                                                        fallback=self.DEFAULT_CHUNKER_CACHE_SIZE)

        if self._beam_size < 1:
            raise ValueError("Parser beam size must be at least 1: %s" % self._beam_size)
        if not 0 < self._advance_percentage <= 1:
            raise ValueError("Advance percentage must be in the interval (0, 1]: %s" %
                             self._advance_percentage)
        if self._chunker_beam_size < 1:
            raise ValueError("Chunker beam size must be at least 1: %s" % self._chunker_beam_size)
        if self._chunker_cache_size < 0:
            raise ValueError("Chunker cache size cannot be negative: %s" %
                             self._chunker_cache_size)

    @property
    def config_file_path(self) -> str:
        """The expanded, absolute path to the configuration file"""
        return self._config_file_path

    @property
    def beam_size(self) -> int:
        """The number of derivations advanced at each step, and the number of complete parses
        collected before the search stops."""
        return self._beam_size

    @property
    def advance_percentage(self) -> float:
        """The share of the probability mass of each build decision that is explored."""
        return self._advance_percentage

    @property
    def derivation_logging(self) -> bool:
        """Whether parses record the decisions that derived them"""
        return self._derivation_logging

    @property
    def head_rules_file(self) -> str:
        """Head rules file path"""
        return self._head_rules_file

    @property
    def chunker_beam_size(self) -> int:
        """The number of chunk sequences kept by the chunker's beam search"""
        return self._chunker_beam_size

    @property
    def chunker_cache_size(self) -> int:
        """The number of chunk contexts the chunker remembers for the current sentence"""
        return self._chunker_cache_size

    def load_head_rules(self) -> EnglishHeadRules:
        """Load the head rules named by the configuration."""
        return EnglishHeadRules.from_file(self._head_rules_file)
