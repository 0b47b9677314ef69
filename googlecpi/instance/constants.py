# Compute Engine network tags (RFC1035 labels)
TAG_MIN_LENGTH = 1
TAG_MAX_LENGTH = 63
TAG_PATTERN = r"^[a-z]([-a-z0-9]*[a-z0-9])?$"
TAG_FIRST_CHAR_PATTERN = r"^[a-z]"
TAG_CHARS_PATTERN = r"^[-a-z0-9]*$"

RULE_TYPE = "must be strings"
RULE_LENGTH = f"must be {TAG_MIN_LENGTH}-{TAG_MAX_LENGTH} characters long"
RULE_FIRST_CHAR = "must start with a lowercase letter"
RULE_CHARS = "must contain only lowercase letters, digits and hyphens"
RULE_LAST_CHAR = "must not end with a hyphen"
