class VamsBaseException(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ServiceNotFoundInPartitionException(VamsBaseException):
    """The service catalog has no definition for the requested service in the requested partition"""

    def __init__(self, service_name: str, partition: str):
        self.service_name = service_name
        self.partition = partition
        super().__init__(f'Service {service_name} not found in partition {partition}')


class TemplateSubstitutionGapException(VamsBaseException):
    """A service address template references a placeholder that has no value to substitute"""

    def __init__(self, template: str, missing: list[str]):
        self.template = template
        self.missing = missing
        super().__init__(f'No value for {", ".join(missing)} in template {template}')


class UnsupportedPartitionException(VamsBaseException):
    """The deployment region does not belong to a partition this app can be deployed to"""

    def __init__(self, region: str):
        self.region = region
        super().__init__(f'Region {region} does not belong to a supported partition')
