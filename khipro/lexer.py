class Lexer:
    """Cursor over input text with convenient navigation methods"""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def peek(self, offset: int = 0) -> str | None:
        """Look at character at current position + offset without consuming"""
        pos = self.pos + offset
        return self.text[pos] if 0 <= pos < len(self.text) else None

    def peek_chunk(self, length: int) -> str:
        """Look at up to length characters from current position without consuming"""
        return self.text[self.pos : self.pos + length]

    def eat(self, count: int = 1) -> str:
        """Consume and return next count characters"""
        start = self.pos
        self.pos = min(self.pos + count, len(self.text))
        return self.text[start : self.pos]

    def at_end(self) -> bool:
        """Check if at end of text"""
        return self.pos >= len(self.text)

    def remaining_length(self) -> int:
        """Number of characters left to consume"""
        return max(len(self.text) - self.pos, 0)
