class BuildFindError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(BuildFindError):
    # errors related to configuration.
    pass

class DiscoveryError(BuildFindError):
    # errors resolving the paths handed to discovery.
    pass

class OutputError(BuildFindError):
    # errors during output operations.
    pass
