from importlib import resources
from functools import cache

class DelimiterDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Quote and bracket style definitions """
        return resources.files('stringkit.data').joinpath('delimiters.yaml')
