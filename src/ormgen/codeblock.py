"""
Builder for indented Python source fragments.
"""
INDENT = '    '


class CodeBlock:
    """Accumulates lines of Python source with managed indentation.

    Usage:
        block = CodeBlock()
        block.begin_control_flow('if ref_name is not None')
        block.add_statement('values[%r] = ref_name' % 'name')
        block.end_control_flow()
        source = block.build()
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._level = 0

    def add_statement(self, statement: str) -> 'CodeBlock':
        self._lines.append(INDENT * self._level + statement)
        return self

    def begin_control_flow(self, header: str) -> 'CodeBlock':
        self.add_statement(f'{header}:')
        self._level += 1
        return self

    def next_control_flow(self, header: str) -> 'CodeBlock':
        self._level -= 1
        return self.begin_control_flow(header)

    def end_control_flow(self) -> 'CodeBlock':
        if self._level == 0:
            raise ValueError('end_control_flow() without matching begin_control_flow()')
        self._level -= 1
        return self

    def build(self) -> str:
        if self._level:
            raise ValueError(f'Unclosed control flow ({self._level} level(s) open)')
        if not self._lines:
            return ''
        return '\n'.join(self._lines) + '\n'
