__author__ = 'Beamparse Developers'
__all__ = [
    'ParseError',
    'HeadRulesParserError',
    'HeadRulesSyntaxError',
]


class ParseError(Exception):
    """A structural problem detected while building or reading a parse tree."""


class HeadRulesParserError(Exception):
    """An error while reading a head rules file"""

    def __init__(self, msg: str = None, filename: str = None, lineno: int = 1, offset: int = 1,
                 text: str = None):
        super().__init__(msg, (filename, lineno, offset, text))
        self.msg = msg
        self.args = (msg, (filename, lineno, offset, text))

        self.filename = filename
        self.lineno = lineno
        self.offset = offset
        self.text = text

    def __repr__(self) -> str:
        return type(self).__name__ + repr((self.msg,
                                           (self.filename, self.lineno, self.offset, self.text)))

    def set_info(self, filename: str = None, lineno: int = None, offset: int = None,
                 text: str = None) -> None:
        """Set additional information on the exception after it has been raised."""
        if filename is not None:
            self.filename = filename
        if lineno is not None:
            self.lineno = lineno
        if offset is not None:
            self.offset = offset
        if text is not None:
            self.text = text
        self.args = (self.msg, (self.filename, self.lineno, self.offset, self.text))


class HeadRulesSyntaxError(HeadRulesParserError, SyntaxError):
    """A syntax error detected in a head rules file"""

    def __repr__(self) -> str:
        return super(HeadRulesParserError, self).__repr__()
