# Namespace for pipeline steps
from .collect_organizations import CollectOrganizations  # noqa: F401
from .enrich_organizations import EnrichOrganizations  # noqa: F401
from .enrich_people import EnrichPeople  # noqa: F401
from .merge_records import MergeRecords  # noqa: F401
