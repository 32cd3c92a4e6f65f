from aws_cdk import RemovalPolicy
from aws_cdk.aws_logs import LogGroup, RetentionDays
from constructs import Construct

from vams_constructs.config import DeploymentConfig
from vams_constructs.security import generate_unique_name_hash

ACCESS_LOGS_RESOURCE_IDENTIFIER = 'VAMS-API-AccessLogs'


def api_access_log_group_name(config: DeploymentConfig) -> str:
    """
    Vended log group names have to be unique in the account, but must not change between deployments of the
    same stack.
    """
    suffix = generate_unique_name_hash(
        config.core_stack_name, config.account, ACCESS_LOGS_RESOURCE_IDENTIFIER, max_length=10
    )
    return f'/aws/vendedlogs/{ACCESS_LOGS_RESOURCE_IDENTIFIER}{suffix}'


class ApiAccessLogGroup(LogGroup):
    """Destination for the API's access logs"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        deployment_config: DeploymentConfig,
        retention: RetentionDays = RetentionDays.TWO_YEARS,
        removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
        **kwargs,
    ):
        super().__init__(
            scope,
            construct_id,
            log_group_name=api_access_log_group_name(deployment_config),
            retention=retention,
            removal_policy=removal_policy,
            **kwargs,
        )
