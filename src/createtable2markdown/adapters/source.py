"""Declared source text of the entries in a CREATE TABLE column list."""

from typing import Optional

import sqlglot
from sqlglot.tokens import Token, TokenType

# Keywords that end a DEFAULT expression and start the next column attribute
DEFAULT_TERMINATORS = {
    "NOT",
    "NULL",
    "AUTO_INCREMENT",
    "AUTOINCREMENT",
    "COMMENT",
    "PRIMARY",
    "UNIQUE",
    "KEY",
    "ON",
    "COLLATE",
    "CHARSET",
    "REFERENCES",
    "CHECK",
    "CONSTRAINT",
    "GENERATED",
    "INVISIBLE",
    "VISIBLE",
    "COLUMN_FORMAT",
    "STORAGE",
}

INDEX_WORDS = {"INDEX", "KEY"}
INDEX_PREFIXES = {"UNIQUE", "FULLTEXT", "SPATIAL"}

_QUOTED = {TokenType.STRING, TokenType.IDENTIFIER}


class DefinitionSource:
    """Source tokens of one column or constraint definition."""

    def __init__(self, sql: str, tokens: list[Token]):
        self.sql = sql
        self.tokens = tokens

    def _is_word(self, token: Token, *words: str) -> bool:
        return token.token_type not in _QUOTED and token.text.upper() in words

    def _top_level(self) -> list[tuple[int, Token]]:
        depth = 0
        result = []
        for i, token in enumerate(self.tokens):
            if token.token_type == TokenType.L_PAREN:
                depth += 1
            elif token.token_type == TokenType.R_PAREN:
                depth -= 1
            elif depth == 0:
                result.append((i, token))
        return result

    def default_text(self) -> Optional[str]:
        """
        Text of the DEFAULT expression exactly as written.

        Returns:
            Expression text, or None when the definition has no DEFAULT
        """
        top = self._top_level()
        for pos, (i, token) in enumerate(top):
            if self._is_word(token, "DEFAULT"):
                start = i + 1
                break
        else:
            return None

        end = len(self.tokens)
        for j, token in top[pos + 1 :]:
            if j == start:
                continue
            if self._is_word(token, *DEFAULT_TERMINATORS) or self._character_set_at(j):
                end = j
                break

        if end <= start:
            return None
        first, last = self.tokens[start], self.tokens[end - 1]
        return self.sql[first.start : last.end + 1]

    def index_keyword(self) -> Optional[str]:
        """
        Index category as declared, e.g. ``unique index`` or ``key``.

        Returns:
            Lowercase keyword, or None when the entry is not a named-kind index
        """
        words = [t for t in self.tokens if t.token_type not in _QUOTED]
        if words and self._is_word(words[0], "CONSTRAINT"):
            words = words[1:]
            kinds = (*INDEX_PREFIXES, *INDEX_WORDS, "PRIMARY", "FOREIGN", "CHECK")
            if words and not self._is_word(words[0], *kinds):
                words = words[1:]
        if not words:
            return None

        first = words[0].text.lower()
        if self._is_word(words[0], *INDEX_WORDS):
            return first
        if self._is_word(words[0], *INDEX_PREFIXES):
            if len(words) > 1 and self._is_word(words[1], *INDEX_WORDS):
                return f"{first} {words[1].text.lower()}"
            return f"{first} key"
        return None

    def _character_set_at(self, i: int) -> bool:
        return (
            self._is_word(self.tokens[i], "CHARACTER")
            and i + 1 < len(self.tokens)
            and self._is_word(self.tokens[i + 1], "SET")
        )


def definition_sources(sql: str, dialect: str) -> list[DefinitionSource]:
    """
    Split the column list of a CREATE TABLE statement into its entries.

    Args:
        sql: Statement text
        dialect: sqlglot dialect used to tokenize

    Returns:
        One source per comma separated entry, in declaration order
    """
    tokens = sqlglot.tokenize(sql, read=dialect)

    entries: list[DefinitionSource] = []
    current: list[Token] = []
    depth = 0
    for token in tokens:
        if token.token_type == TokenType.L_PAREN:
            depth += 1
            if depth == 1:
                continue
        elif token.token_type == TokenType.R_PAREN:
            depth -= 1
            if depth == 0:
                break
        elif token.token_type == TokenType.COMMA and depth == 1:
            entries.append(DefinitionSource(sql, current))
            current = []
            continue

        if depth >= 1:
            current.append(token)

    if current:
        entries.append(DefinitionSource(sql, current))
    return entries
