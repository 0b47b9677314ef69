# Wire keys shared by several property bags
KEY_ZONE = "zone"
KEY_NAME = "name"
KEY_TAGS = "tags"
KEY_EPHEMERAL_EXTERNAL_IP = "ephemeral_external_ip"
KEY_IP_FORWARDING = "ip_forwarding"

# Disk
KEY_DISK_TYPE = "type"

# Network
KEY_NETWORK_NAME = "network_name"
KEY_SUBNETWORK_NAME = "subnetwork_name"

# Snapshot
KEY_DEPLOYMENT = "deployment"
KEY_JOB = "job"
KEY_INDEX = "index"
SNAPSHOT_DESCRIPTION_SEPARATOR = "/"

# Stemcell
KEY_VERSION = "version"
KEY_INFRASTRUCTURE = "infrastructure"
KEY_SOURCE_URL = "source_url"
KEY_IMAGE_URL = "image_url"

# VM
KEY_MACHINE_TYPE = "machine_type"
KEY_CPU = "cpu"
KEY_RAM = "ram"
KEY_ROOT_DISK_SIZE_GB = "root_disk_size_gb"
KEY_ROOT_DISK_TYPE = "root_disk_type"
KEY_AUTOMATIC_RESTART = "automatic_restart"
KEY_ON_HOST_MAINTENANCE = "on_host_maintenance"
KEY_PREEMPTIBLE = "preemptible"
KEY_SERVICE_ACCOUNT = "service_account"
KEY_SERVICE_SCOPES = "service_scopes"
KEY_TARGET_POOL = "target_pool"
KEY_BACKEND_SERVICE = "backend_service"

# Decoding and validation defaults
DEFAULT_IGNORE_UNKNOWN_KEYS = True
# Network tags were historically never checked
DEFAULT_VALIDATE_NETWORK_TAGS = False
