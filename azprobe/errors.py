"""
Errors raised by azprobe helpers.
"""


class NotFoundError(Exception):
    """An Azure object that was expected to exist could not be found."""

    def __init__(self, object_type, object_id, region=""):
        self.object_type = object_type
        self.object_id = object_id
        self.region = region
        super().__init__(
            f"Object {object_type} with id {object_id} not found in region {region}"
        )


class SubscriptionIDNotFound(Exception):
    """No subscription ID was passed and none is configured in the environment."""

    def __init__(self, env_var):
        self.env_var = env_var
        super().__init__(
            f"Subscription ID not found. Pass one explicitly or set {env_var}."
        )


class ResourceGroupNameNotFound(Exception):
    """No resource group name was passed and none is configured in the environment."""

    def __init__(self, env_var):
        self.env_var = env_var
        super().__init__(
            f"Resource group name not found. Pass one explicitly or set {env_var}."
        )


class EmptyIdentifierError(ValueError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"'{name}' must not be empty")
