"""autostatus: report CI build and stage results as GitHub commit statuses."""

__version__ = "0.1.0"
