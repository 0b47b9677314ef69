from googlecpi.schema import (
    BOOLEAN,
    INTEGER,
    OPTIONAL_BOOLEAN,
    STRING,
    STRING_LIST,
    TAGS,
    Field,
    schema_from_fields,
)
from .constants import (
    KEY_AUTOMATIC_RESTART,
    KEY_BACKEND_SERVICE,
    KEY_CPU,
    KEY_DEPLOYMENT,
    KEY_DISK_TYPE,
    KEY_EPHEMERAL_EXTERNAL_IP,
    KEY_IMAGE_URL,
    KEY_INDEX,
    KEY_INFRASTRUCTURE,
    KEY_IP_FORWARDING,
    KEY_JOB,
    KEY_MACHINE_TYPE,
    KEY_NAME,
    KEY_NETWORK_NAME,
    KEY_ON_HOST_MAINTENANCE,
    KEY_PREEMPTIBLE,
    KEY_RAM,
    KEY_ROOT_DISK_SIZE_GB,
    KEY_ROOT_DISK_TYPE,
    KEY_SERVICE_ACCOUNT,
    KEY_SERVICE_SCOPES,
    KEY_SOURCE_URL,
    KEY_SUBNETWORK_NAME,
    KEY_TAGS,
    KEY_TARGET_POOL,
    KEY_VERSION,
    KEY_ZONE,
)

DISK_FIELDS = (
    Field("disk_type", KEY_DISK_TYPE, STRING, "Disk type (e.g pd-ssd)"),
    Field("zone", KEY_ZONE, STRING, "Zone of the disk"),
)

NETWORK_FIELDS = (
    Field("network_name", KEY_NETWORK_NAME, STRING, "Name of the network"),
    Field("subnetwork_name", KEY_SUBNETWORK_NAME, STRING, "Name of the subnetwork"),
    Field("tags", KEY_TAGS, TAGS, "Tags applied to the instances of the network"),
    Field(
        "ephemeral_external_ip",
        KEY_EPHEMERAL_EXTERNAL_IP,
        BOOLEAN,
        "Assign an ephemeral external IP (default: False)",
    ),
    Field(
        "ip_forwarding",
        KEY_IP_FORWARDING,
        BOOLEAN,
        "Enable IP forwarding (default: False)",
    ),
)

SNAPSHOT_FIELDS = (
    Field("deployment", KEY_DEPLOYMENT, STRING, "Deployment name"),
    Field("job", KEY_JOB, STRING, "Job name"),
    Field("index", KEY_INDEX, STRING, "Job index"),
)

STEMCELL_FIELDS = (
    Field("name", KEY_NAME, STRING, "Stemcell name"),
    Field("version", KEY_VERSION, STRING, "Stemcell version"),
    Field("infrastructure", KEY_INFRASTRUCTURE, STRING, "Stemcell infrastructure"),
    Field("source_url", KEY_SOURCE_URL, STRING, "URL of the image tarball"),
    # Image.SelfLink
    Field("image_url", KEY_IMAGE_URL, STRING, "URL of an existing image"),
)

VM_FIELDS = (
    Field("zone", KEY_ZONE, STRING, "Zone of the instance"),
    Field("name", KEY_NAME, STRING, "Name of the instance"),
    Field("machine_type", KEY_MACHINE_TYPE, STRING, "Machine type (e.g n1-standard-1)"),
    Field("cpu", KEY_CPU, INTEGER, "Number of CPUs (custom machine type)"),
    Field("ram", KEY_RAM, INTEGER, "Amount of RAM in MB (custom machine type)"),
    Field("root_disk_size_gb", KEY_ROOT_DISK_SIZE_GB, INTEGER, "Root disk size in GB"),
    Field("root_disk_type", KEY_ROOT_DISK_TYPE, STRING, "Root disk type"),
    Field(
        "automatic_restart",
        KEY_AUTOMATIC_RESTART,
        BOOLEAN,
        "Restart the instance if it is terminated by the platform",
    ),
    Field(
        "on_host_maintenance",
        KEY_ON_HOST_MAINTENANCE,
        STRING,
        "Maintenance policy (e.g MIGRATE or TERMINATE)",
    ),
    Field("preemptible", KEY_PREEMPTIBLE, BOOLEAN, "Use a preemptible instance"),
    Field("service_account", KEY_SERVICE_ACCOUNT, STRING, "Service account email"),
    Field(
        "service_scopes",
        KEY_SERVICE_SCOPES,
        STRING_LIST,
        "Service account scopes, applied in order",
    ),
    Field("target_pool", KEY_TARGET_POOL, STRING, "Target pool to join"),
    Field("backend_service", KEY_BACKEND_SERVICE, STRING, "Backend service to join"),
    Field("tags", KEY_TAGS, TAGS, "Tags applied to the instance"),
    Field(
        "ephemeral_external_ip",
        KEY_EPHEMERAL_EXTERNAL_IP,
        OPTIONAL_BOOLEAN,
        "Assign an ephemeral external IP (default: inherited from the network)",
    ),
    Field(
        "ip_forwarding",
        KEY_IP_FORWARDING,
        OPTIONAL_BOOLEAN,
        "Enable IP forwarding (default: inherited from the network)",
    ),
)

DISK_SCHEMA = schema_from_fields("Disk Cloud Properties", DISK_FIELDS)
NETWORK_SCHEMA = schema_from_fields("Network Cloud Properties", NETWORK_FIELDS)
SNAPSHOT_SCHEMA = schema_from_fields("Snapshot Metadata", SNAPSHOT_FIELDS)
STEMCELL_SCHEMA = schema_from_fields("Stemcell Cloud Properties", STEMCELL_FIELDS)
VM_SCHEMA = schema_from_fields("VM Cloud Properties", VM_FIELDS)
