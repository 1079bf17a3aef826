class RiskGraphError(Exception):
    pass


class MalformedInputError(RiskGraphError):
    pass


class DataSourceError(RiskGraphError):
    pass
