import pytest
from ormgen.codeblock import CodeBlock


def test_empty_block():
    assert CodeBlock().build() == ''


def test_control_flow():
    source = (CodeBlock()
              .begin_control_flow('if ref is not None')
              .add_statement('x = ref')
              .next_control_flow('else')
              .add_statement('x = None')
              .end_control_flow()
              .add_statement('y = x')
              .build())

    assert source == ('if ref is not None:\n'
                      '    x = ref\n'
                      'else:\n'
                      '    x = None\n'
                      'y = x\n')


def test_unbalanced_control_flow():
    with pytest.raises(ValueError):
        CodeBlock().end_control_flow()

    with pytest.raises(ValueError):
        CodeBlock().begin_control_flow('if x').add_statement('pass').build()
