class CPIError(Exception):
    pass


class CloudPropertiesError(CPIError):
    pass


class CloudPropertiesDecodeError(CloudPropertiesError):
    def __init__(self, properties, key, msg):
        """
        Args:
            properties: name of the property bag being decoded
            key: first offending wire key (None if the whole map is wrong)
            msg: what went wrong
        """
        where = properties if key is None else f"{properties}.{key}"
        super().__init__(f"Unable to decode {where}: {msg}")
        self.properties = properties
        self.key = key
        self.msg = msg


class CloudPropertiesValidationError(CloudPropertiesError):
    pass


class InvalidTagError(CloudPropertiesValidationError):
    def __init__(self, tag, rule, field="tags"):
        super().__init__(f"Tag '{tag}' in {field} is invalid: tags {rule}")
        self.tag = tag
        self.rule = rule
        self.field = field
