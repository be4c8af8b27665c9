import logging
import yaml
from functools import cache, cached_property
from typing import Dict
from stringkit.connections import DelimiterDataSource
from stringkit.entities import Delimiter

logger = logging.getLogger(__name__)

class DelimiterData(DelimiterDataSource):
    def __init__(self):
        with self.yaml_path().open('r') as f:
            data = yaml.safe_load(f)
        self.quotes: Dict[str, str] = data['quotes']
        self.brackets: Dict[str, Dict[str, str]] = data['brackets']
        logger.debug('Loaded %d quote and %d bracket styles', len(self.quotes), len(self.brackets))

    @cached_property
    def quote_delimiters(self) -> Dict[str, Delimiter]:
        return {style: Delimiter.symmetric(char) for style, char in self.quotes.items()}

    @cached_property
    def bracket_delimiters(self) -> Dict[str, Delimiter]:
        return {style: Delimiter.resolve(pair) for style, pair in self.brackets.items()}

@cache
def delimiter_data() -> DelimiterData:
    """Lazily loaded, shared delimiter style table."""
    return DelimiterData()
