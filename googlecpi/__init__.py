# flake8: noqa
from googlecpi.action.cloud_properties import (
    DiskCloudProperties,
    NetworkCloudProperties,
    SnapshotMetadata,
    StemcellCloudProperties,
    Validatable,
    VMCloudProperties,
)
from googlecpi.errors import (
    CloudPropertiesDecodeError,
    CloudPropertiesError,
    CloudPropertiesValidationError,
    CPIError,
    InvalidTagError,
)
from googlecpi.instance.tags import Tags, check_tag
from googlecpi.types import Environment, VMMetadata, VMServiceAccount, VMServiceScopes
from googlecpi.version import __version__
