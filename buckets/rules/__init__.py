from buckets.rules.identity import address_of, record_filename
from buckets.rules.models import Rule, new_rule
from buckets.rules.probe import IFilesystemProbe, LocalFilesystemProbe
from buckets.rules.repository import RuleStore

__all__ = [
    "IFilesystemProbe",
    "LocalFilesystemProbe",
    "Rule",
    "RuleStore",
    "address_of",
    "new_rule",
    "record_filename",
]
