class GaugeFilesError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(GaugeFilesError):
    # errors related to configuration.
    pass

class DiscoveryError(GaugeFilesError):
    # errors during file discovery.
    pass

class UserInputError(DiscoveryError):
    # a requested path is missing or holds nothing to discover.
    pass

class PathResolutionError(DiscoveryError):
    # an absolute path could not be computed for a search path.
    pass
