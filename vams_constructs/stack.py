from aws_cdk import Aspects, Environment
from aws_cdk import Stack as CdkStack
from cdk_nag import AwsSolutionsChecks

from vams_constructs.config import DeploymentConfig
from vams_constructs.service_catalog import ServiceName
from vams_constructs.service_helper import ResolutionContext, ServiceFormatter, ServiceResolver


class StandardTags(dict):
    """Enforces three required tags for all stacks"""

    def __init__(self, *, project: str, service: str, environment: str, **kwargs):
        super().__init__(Project=project, Service=service, Environment=environment, **kwargs)


class Stack(CdkStack):
    """
    Base stack for the app.

    Service addresses for resources declared in this stack come from `self.service(...)`, which resolves them
    against the deployment configuration this stack was created with.
    """

    def __init__(self, *args, standard_tags: StandardTags, deployment_config: DeploymentConfig, **kwargs):
        kwargs.setdefault('env', Environment(account=deployment_config.account, region=deployment_config.region))
        super().__init__(*args, tags=standard_tags, **kwargs)
        self.deployment_config = deployment_config
        self.service_resolver = ServiceResolver(ResolutionContext.from_config(deployment_config))
        # AWS-recommended rule set for best practice
        Aspects.of(self).add(AwsSolutionsChecks())

    def service(self, name: ServiceName | str, use_fips_override: bool | None = None) -> ServiceFormatter:
        return self.service_resolver.service(name, use_fips_override=use_fips_override)
