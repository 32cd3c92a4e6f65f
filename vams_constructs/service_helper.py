"""
Partition-aware addresses for AWS services.

Resource declarations ask a ServiceResolver for a ServiceFormatter per abstract service name, then read ARNs,
endpoint hostnames and service principals from it, so that the same declarations synthesize correctly in the
commercial, GovCloud and isolated partitions, with or without FIPS endpoints.
"""

import re
from dataclasses import dataclass
from functools import cached_property

from aws_cdk.aws_iam import ServicePrincipal

from vams_constructs.config import DeploymentConfig, logger
from vams_constructs.exceptions import ServiceNotFoundInPartitionException, TemplateSubstitutionGapException
from vams_constructs.partition import Partition, partition_for_region
from vams_constructs.service_catalog import (
    ACCOUNT_ID,
    REGION,
    RESOURCE_ID,
    SERVICE_LOOKUP,
    ServiceDefinition,
    ServiceName,
)

_UNRESOLVED_PLACEHOLDER = re.compile(r'\{[a-z-]+\}')


@dataclass(frozen=True)
class ResolutionContext:
    """
    The deployment values substituted into service address templates.

    :param region: The region to address services in
    :param account: The account resources belong to
    :param use_fips: Default for whether to use FIPS endpoints, when a service doesn't override it
    :param strict: Raise TemplateSubstitutionGapException instead of warning when a template value is empty
    """

    region: str
    account: str
    use_fips: bool = False
    strict: bool = False

    @classmethod
    def from_config(cls, config: DeploymentConfig) -> 'ResolutionContext':
        return cls(
            region=config.region,
            account=config.account,
            use_fips=config.use_fips,
            strict=config.strict_resolution,
        )


@dataclass(frozen=True)
class IamArn:
    role: str
    policy: str


class ServiceFormatter:
    """
    Addresses for one service, in one partition.

    The catalog row is looked up on construction, so a service that is not defined for the partition fails
    here, while the app is being defined, rather than producing an address that fails at deploy time.

    :param name: The abstract service name
    :param partition: The partition to address the service in
    :param context: Region, account and FIPS default to substitute into the service's templates
    :param use_fips_override: Use (or don't use) FIPS endpoints for this service, regardless of the context default
    :raises ServiceNotFoundInPartitionException: If the catalog has no row for the service in the partition
    """

    def __init__(
        self,
        name: ServiceName | str,
        partition: Partition | str,
        context: ResolutionContext,
        use_fips_override: bool | None = None,
    ):
        service = SERVICE_LOOKUP.get(name, {}).get(partition)
        if service is None:
            raise ServiceNotFoundInPartitionException(name, partition)

        self._name = ServiceName(name)
        self._partition = Partition(partition)
        self._service: ServiceDefinition = service
        self._context = context
        if use_fips_override is not None:
            self._use_fips = use_fips_override
        else:
            self._use_fips = context.use_fips
        logger.debug(
            'Resolved service definition',
            service=self._name.value,
            partition=self._partition.value,
            use_fips=self._use_fips,
        )

    @property
    def name(self) -> ServiceName:
        return self._name

    @property
    def partition(self) -> Partition:
        return self._partition

    @property
    def use_fips(self) -> bool:
        return self._use_fips

    def arn(self, resource_id: str, resource_name: str | None = None) -> str:
        """
        ARN for a resource of this service.

        :param resource_id: Substituted for the resource-id placeholder in the service's ARN template
        :param resource_name: If provided, appended to the ARN as a path segment
        """
        arn = self._replace_values(self._service.arn, resource_id)
        if resource_name:
            arn += f'/{resource_name}'
        return arn

    @property
    def endpoint(self) -> str:
        if self._use_fips:
            return self._replace_values(self._service.fips_hostname)
        return self._replace_values(self._service.hostname)

    @property
    def principal(self) -> ServicePrincipal:
        return ServicePrincipal(self.principal_string)

    @property
    def principal_string(self) -> str:
        return self._replace_values(self._service.principal)

    def _replace_values(self, template: str, resource_id: str | None = None) -> str:
        values = {
            REGION: self._context.region or '',
            ACCOUNT_ID: self._context.account or '',
            RESOURCE_ID: resource_id or '',
        }
        result = template.replace(REGION, values[REGION]).replace(ACCOUNT_ID, values[ACCOUNT_ID])
        # Resource ids are caller data and may contain braces, so leftovers are found before inserting them
        unresolved = [token for token in _UNRESOLVED_PLACEHOLDER.findall(result) if token != RESOURCE_ID]
        result = result.replace(RESOURCE_ID, values[RESOURCE_ID])

        # An empty resource id is the caller's choice, only empty context values are gaps
        missing = [
            placeholder for placeholder in (REGION, ACCOUNT_ID) if placeholder in template and not values[placeholder]
        ]
        missing.extend(unresolved)
        if missing:
            if self._context.strict:
                raise TemplateSubstitutionGapException(template, missing)
            logger.warning(
                'Service address template has placeholders with no value',
                service=self._name.value,
                partition=self._partition.value,
                template=template,
                missing=missing,
            )
        return result


class ServiceResolver:
    """
    Builds ServiceFormatters for a single deployment context.

    :param context: The resolution context every formatter from this resolver will use
    :param partition: The partition to resolve services in. Derived from the context region if not provided.
    """

    def __init__(self, context: ResolutionContext, partition: Partition | str | None = None):
        self.context = context
        self._partition = partition

    @cached_property
    def partition(self) -> Partition:
        if self._partition is not None:
            return Partition(self._partition)
        return partition_for_region(self.context.region)

    def service(
        self,
        name: ServiceName | str,
        use_fips_override: bool | None = None,
        partition: Partition | str | None = None,
    ) -> ServiceFormatter:
        return ServiceFormatter(
            name,
            partition if partition is not None else self.partition,
            self.context,
            use_fips_override=use_fips_override,
        )

    def iam_arn(self, name: str) -> IamArn:
        """Role and policy ARNs for an IAM name, in any account of this partition"""
        return IamArn(
            role=f'arn:{self.partition}:iam::*:role/{name}',
            policy=f'arn:{self.partition}:iam::*:policy/{name}',
        )

    def ssm_parameter_arn(self, parameter_name: str) -> str:
        # Parameter names with a path hierarchy start with a slash, which the ARN already has
        return self.service(ServiceName.SSM).arn(parameter_name.lstrip('/'))
