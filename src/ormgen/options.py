from dataclasses import dataclass
from typing import Any

from ormgen.sql import SUPPORTED_DIALECTS

from libb import ConfigOptions, load_options

__all__ = [
    'TableOptions',
    'get_table_options',
]


@dataclass
class TableOptions(ConfigOptions):
    """Options of the table enclosing the mapped fields

    supported dialects: `sqlite`, `postgresql`

    - model_class: Name of the model class in generated code
    - package_private: Access every column through the generated helper (default: False)
    - use_is_for_private_booleans: Read private boolean fields with `is_<name>()` (default: False)
    """
    model_class: str = None
    package_private: bool = False
    use_is_for_private_booleans: bool = False
    dialect: str = 'sqlite'

    def __post_init__(self):
        if self.dialect not in SUPPORTED_DIALECTS:
            raise ValueError(f'dialect must be one of: {list(SUPPORTED_DIALECTS)}')
        if not self.model_class:
            raise ValueError('model_class is required')

    @property
    def table_class(self) -> str:
        return f'{self.model_class}_Table'

    @property
    def helper_class(self) -> str:
        return f'{self.model_class}_Helper'


def get_table_options(options: TableOptions | dict[str, Any] | str,
                      config: Any | None = None, **kw: Any) -> TableOptions:
    """Load table options

    Args:
        options: Can be:
                - TableOptions object
                - String path to configuration
                - Dictionary of options
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        TableOptions object
    """
    if isinstance(options, TableOptions):
        return options

    options_func = load_options(cls=TableOptions)(lambda o, c: o)
    return options_func(options, config, **kw)
