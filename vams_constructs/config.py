import logging
import os
from dataclasses import dataclass

from aws_lambda_powertools.logging import Logger
from constructs import Node

from vams_constructs.exceptions import UnsupportedPartitionException
from vams_constructs.partition import Partition, partition_for_region

logging.basicConfig()
logger = Logger()
logger.setLevel(logging.DEBUG if os.environ.get('DEBUG', 'false').lower() == 'true' else logging.INFO)

CONFIG_CONTEXT_KEY = 'vams_config'


@dataclass(frozen=True)
class DeploymentConfig:
    """
    Deployment-wide settings that service address resolution and resource naming depend on.

    :param region: The region the app is deployed to
    :param account: The account the app is deployed to
    :param core_stack_name: Name of the core stack, used to derive reproducible resource names
    :param use_fips: Whether services should be addressed through their FIPS endpoints by default
    :param gov_cloud_enabled: Whether this is a GovCloud deployment
    :param strict_resolution: Raise, rather than warn, when an address template has an empty placeholder
    """

    region: str
    account: str
    core_stack_name: str
    use_fips: bool = False
    gov_cloud_enabled: bool = False
    strict_resolution: bool = False

    def __post_init__(self):
        missing = [
            key
            for key, value in (
                ('env.region', self.region),
                ('env.account', self.account),
                ('env.coreStackName', self.core_stack_name),
            )
            if not value
        ]
        if missing:
            raise ValueError(f'This app requires a value for {", ".join(missing)} in its deployment configuration.')

        if self.gov_cloud_enabled and not self._is_gov_cloud_region():
            raise ValueError(
                f"GovCloud is enabled in this deployment configuration, but region '{self.region}' is not a GovCloud"
                ' region.'
            )

    def _is_gov_cloud_region(self) -> bool:
        try:
            return partition_for_region(self.region) == Partition.AWS_US_GOV
        except UnsupportedPartitionException:
            return False

    @classmethod
    def from_dict(cls, config: dict) -> 'DeploymentConfig':
        """
        Build from a configuration dict, shaped like:

        .. code-block:: json

            {
                "env": {"region": "us-east-1", "account": "111122223333", "coreStackName": "vams-core"},
                "app": {"useFips": false, "govCloud": {"enabled": false}, "strictServiceResolution": false}
            }
        """
        env = config.get('env', {})
        app = config.get('app', {})
        return cls(
            region=env.get('region'),
            account=env.get('account'),
            core_stack_name=env.get('coreStackName'),
            use_fips=app.get('useFips', False),
            gov_cloud_enabled=app.get('govCloud', {}).get('enabled', False),
            strict_resolution=app.get('strictServiceResolution', False),
        )

    @classmethod
    def from_context(cls, node: Node) -> 'DeploymentConfig':
        """Build from the deployment configuration provided in the CDK app context"""
        return cls.from_dict(node.get_context(CONFIG_CONTEXT_KEY))
