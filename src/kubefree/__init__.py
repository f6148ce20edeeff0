"""kubefree: show requested, limited and used resources of Kubernetes nodes."""

__version__ = "0.3.0"
