"""Cloud properties exchanged with the director.

Every property bag is an immutable value built from the raw (JSON) map
found in a CPI request:

.. code-block:: python

    props = VMCloudProperties.from_dictionary(
        {"zone": "us-central1-a", "tags": ["web", "db-1"]}
    )
    props.validate()

Decoding only checks the shape of the map. The naming rules of the tags are
enforced by :py:meth:`Validatable.validate`.
"""
import json
import logging
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Mapping, Optional, Sequence

from jsonschema.exceptions import best_match

from googlecpi.errors import CloudPropertiesDecodeError
from googlecpi.instance.tags import Tags
from googlecpi.schema import (
    STRING_LIST,
    TAGS,
    CloudPropertiesValidator,
    Field,
    close_schema,
)
from googlecpi.types import VMServiceAccount, VMServiceScopes
from .constants import (
    DEFAULT_IGNORE_UNKNOWN_KEYS,
    DEFAULT_VALIDATE_NETWORK_TAGS,
    SNAPSHOT_DESCRIPTION_SEPARATOR,
)
from .schema import (
    DISK_FIELDS,
    DISK_SCHEMA,
    NETWORK_FIELDS,
    NETWORK_SCHEMA,
    SNAPSHOT_FIELDS,
    SNAPSHOT_SCHEMA,
    STEMCELL_FIELDS,
    STEMCELL_SCHEMA,
    VM_FIELDS,
    VM_SCHEMA,
)

logger = logging.getLogger(__name__)


class Validatable(metaclass=ABCMeta):
    """Property bags carrying values subject to the provider policies."""

    @abstractmethod
    def validate(self):
        """Raise a CloudPropertiesValidationError on the first violation."""
        pass


class BaseCloudProperties:
    """Base class for all the property bags.

    Subclasses are frozen dataclasses whose attributes are described by
    ``_FIELDS``.
    """

    # Setting this is deferred to the inherited classes
    _FIELDS: ClassVar[Sequence[Field]] = ()
    _SCHEMA: ClassVar[Optional[Dict]] = None

    def __post_init__(self):
        # lists given programmatically are frozen too
        for f in self._FIELDS:
            if f.kind not in (TAGS, STRING_LIST):
                continue
            value = getattr(self, f.attribute)
            # a str is iterable but would be split into characters
            if value is None or isinstance(value, str):
                raise TypeError(
                    f"{f.attribute} must be a sequence of strings, "
                    f"got {type(value).__name__}"
                )
            if f.kind == TAGS and not isinstance(value, Tags):
                object.__setattr__(self, f.attribute, Tags(value))
            elif f.kind == STRING_LIST and not isinstance(value, tuple):
                object.__setattr__(self, f.attribute, tuple(value))

    @classmethod
    def schema(
        cls, ignore_unknown_keys: bool = DEFAULT_IGNORE_UNKNOWN_KEYS
    ) -> Dict:
        assert cls._SCHEMA is not None
        if ignore_unknown_keys:
            return cls._SCHEMA
        return close_schema(cls._SCHEMA)

    @classmethod
    def validate_dictionary(
        cls,
        dictionary: Mapping,
        ignore_unknown_keys: bool = DEFAULT_IGNORE_UNKNOWN_KEYS,
    ):
        """Check the shape of a raw map.

        Raises:
            CloudPropertiesDecodeError: on the most relevant mismatch
        """
        validator = CloudPropertiesValidator(cls.schema(ignore_unknown_keys))
        error = best_match(validator.iter_errors(dictionary))
        if error is None:
            return
        key = error.path[0] if error.path else None
        raise CloudPropertiesDecodeError(cls.__name__, key, error.message) from error

    @classmethod
    def from_dictionary(
        cls,
        dictionary: Mapping,
        validate: bool = True,
        ignore_unknown_keys: bool = DEFAULT_IGNORE_UNKNOWN_KEYS,
    ):
        """Alternative constructor. Build the properties from a raw map.

        Args:
            dictionary: the raw map
            validate: check the shape of the map first
            ignore_unknown_keys: with False, keys that aren't part of the
                property bag are a decoding error. Absent or null keys
                always leave the default value.
        """
        if validate:
            cls.validate_dictionary(dictionary, ignore_unknown_keys)

        kwargs = {}
        for f in cls._FIELDS:
            kwargs[f.attribute] = f.decode(dictionary.get(f.key))
        self = cls(**kwargs)  # type: ignore
        logger.debug("%s = %s", cls.__name__, json.dumps(self.to_dict()))
        return self

    @classmethod
    def from_settings(cls, **kwargs):
        """Alternative constructor. Build the properties from the kwargs."""
        return cls(**kwargs)  # type: ignore

    def to_dict(self) -> Dict:
        """The raw map, limited to the values that aren't defaults."""
        d: Dict = {}
        for f in self._FIELDS:
            value = getattr(self, f.attribute)
            if f.is_default(value):
                continue
            d[f.key] = f.encode(value)
        return d


@dataclass(frozen=True)
class DiskCloudProperties(BaseCloudProperties):
    _FIELDS = DISK_FIELDS
    _SCHEMA = DISK_SCHEMA

    disk_type: str = ""
    zone: str = ""


@dataclass(frozen=True)
class NetworkCloudProperties(BaseCloudProperties, Validatable):
    """Properties of a network attachment.

    Unlike :py:class:`VMCloudProperties`, ``ephemeral_external_ip`` and
    ``ip_forwarding`` are plain booleans: absent and False are the same.
    """

    _FIELDS = NETWORK_FIELDS
    _SCHEMA = NETWORK_SCHEMA

    network_name: str = ""
    subnetwork_name: str = ""
    tags: Tags = Tags()
    ephemeral_external_ip: bool = False
    ip_forwarding: bool = False

    def validate(self, validate_tags: bool = DEFAULT_VALIDATE_NETWORK_TAGS):
        """Check the tags, only if ``validate_tags`` is True.

        Network tags have never been rejected at this level, passing True
        aligns them with the VM tags.
        """
        if validate_tags:
            self.tags.validate()


@dataclass(frozen=True)
class SnapshotMetadata(BaseCloudProperties):
    _FIELDS = SNAPSHOT_FIELDS
    _SCHEMA = SNAPSHOT_SCHEMA

    deployment: str = ""
    job: str = ""
    index: str = ""

    @property
    def description(self) -> str:
        return SNAPSHOT_DESCRIPTION_SEPARATOR.join(
            [self.deployment, self.job, self.index]
        )


@dataclass(frozen=True)
class StemcellCloudProperties(BaseCloudProperties):
    """Where the boot image comes from.

    Either ``source_url`` (an image tarball) or ``image_url`` (an existing
    image) is meaningful, nothing here prevents both from being set.
    """

    _FIELDS = STEMCELL_FIELDS
    _SCHEMA = STEMCELL_SCHEMA

    name: str = ""
    version: str = ""
    infrastructure: str = ""
    source_url: str = ""
    image_url: str = ""

    @property
    def is_light(self) -> bool:
        """True iff the stemcell points to an existing image."""
        return self.image_url != ""


@dataclass(frozen=True)
class VMCloudProperties(BaseCloudProperties, Validatable):
    """Properties of a compute instance.

    ``ephemeral_external_ip`` and ``ip_forwarding`` are tri-state: None
    defers to the network, True/False override it.
    """

    _FIELDS = VM_FIELDS
    _SCHEMA = VM_SCHEMA

    zone: str = ""
    name: str = ""
    machine_type: str = ""
    cpu: int = 0
    ram: int = 0
    root_disk_size_gb: int = 0
    root_disk_type: str = ""
    automatic_restart: bool = False
    on_host_maintenance: str = ""
    preemptible: bool = False
    service_account: VMServiceAccount = ""
    service_scopes: VMServiceScopes = ()
    target_pool: str = ""
    backend_service: str = ""
    tags: Tags = Tags()
    ephemeral_external_ip: Optional[bool] = None
    ip_forwarding: Optional[bool] = None

    def validate(self):
        self.tags.validate()

    def effective_ephemeral_external_ip(
        self, network: NetworkCloudProperties
    ) -> bool:
        if self.ephemeral_external_ip is None:
            return network.ephemeral_external_ip
        return self.ephemeral_external_ip

    def effective_ip_forwarding(self, network: NetworkCloudProperties) -> bool:
        if self.ip_forwarding is None:
            return network.ip_forwarding
        return self.ip_forwarding
