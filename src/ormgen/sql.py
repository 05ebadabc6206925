"""
SQL identifier quoting and placeholder helpers.
"""
SUPPORTED_DIALECTS = ('sqlite', 'postgresql')


def quote_identifier(identifier: str, dialect: str = 'sqlite') -> str:
    """Safely quote database identifiers.

    Parameters
        identifier: Table or column name
        dialect: Database dialect

    Returns
        Quoted identifier

    Raises
        ValueError: If dialect is unsupported
    """
    if dialect in SUPPORTED_DIALECTS:
        return '"' + identifier.replace('"', '""') + '"'

    raise ValueError(f'Unknown dialect: {dialect}')


def make_placeholder(dialect: str = 'sqlite') -> str:
    """Return the positional parameter placeholder for a dialect.

    Raises
        ValueError: If dialect is unsupported
    """
    if dialect == 'postgresql':
        return '%s'
    if dialect == 'sqlite':
        return '?'

    raise ValueError(f'Unknown dialect: {dialect}')
