# -*- coding: utf-8 -*-
from typing import Any, Dict, Tuple

# Opaque passthrough containers, their content is defined by the consumer
Environment = Dict[str, Any]
VMMetadata = Dict[str, str]

VMServiceAccount = str
# Order matters: scopes are applied in this order
VMServiceScopes = Tuple[str, ...]
