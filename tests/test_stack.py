from unittest import TestCase

from aws_cdk import App, Environment
from aws_cdk.assertions import Template
from aws_cdk.aws_iam import CfnRole, Role

from vams_constructs.config import DeploymentConfig
from vams_constructs.exceptions import ServiceNotFoundInPartitionException
from vams_constructs.partition import Partition
from vams_constructs.service_catalog import ServiceName
from vams_constructs.stack import Stack, StandardTags
from tests.test_context import TEST_ACCOUNT_ID, TEST_GOV_REGION, TEST_REGION, make_config_dict


class TestStack(TestCase):
    def _stack(self, config: DeploymentConfig, **kwargs) -> Stack:
        return Stack(
            App(),
            'Stack',
            standard_tags=StandardTags(project='vams', service='test-service', environment='test'),
            deployment_config=config,
            **kwargs,
        )

    def test_environment_from_config(self):
        stack = self._stack(DeploymentConfig.from_dict(make_config_dict()))

        self.assertEqual(TEST_ACCOUNT_ID, stack.account)
        self.assertEqual(TEST_REGION, stack.region)
        self.assertEqual(Partition.AWS, stack.service_resolver.partition)

    def test_explicit_environment(self):
        stack = self._stack(
            DeploymentConfig.from_dict(make_config_dict()),
            env=Environment(account='444455556666', region=TEST_REGION),
        )

        self.assertEqual('444455556666', stack.account)

    def test_standard_tags(self):
        tags = StandardTags(project='vams', service='test-service', environment='test', Owner='assets')

        self.assertEqual(
            {'Project': 'vams', 'Service': 'test-service', 'Environment': 'test', 'Owner': 'assets'}, dict(tags)
        )

    def test_gov_cloud_service_principal(self):
        stack = self._stack(
            DeploymentConfig.from_dict(make_config_dict(region=TEST_GOV_REGION, use_fips=True, gov_cloud=True))
        )
        Role(stack, 'Role', assumed_by=stack.service(ServiceName.LAMBDA).principal)

        template = Template.from_stack(stack)

        self.assertEqual(Partition.AWS_US_GOV, stack.service_resolver.partition)
        self.assertEqual(f'lambda-fips.{TEST_GOV_REGION}.amazonaws.com', stack.service(ServiceName.LAMBDA).endpoint)
        self.assertEqual(
            f'lambda.{TEST_GOV_REGION}.amazonaws.com',
            stack.service(ServiceName.LAMBDA, use_fips_override=False).endpoint,
        )
        template.has_resource_properties(
            CfnRole.CFN_RESOURCE_TYPE_NAME,
            {
                'AssumeRolePolicyDocument': {
                    'Statement': [
                        {
                            'Action': 'sts:AssumeRole',
                            'Effect': 'Allow',
                            'Principal': {'Service': 'lambda.amazonaws.com'},
                        }
                    ]
                }
            },
        )

    def test_service_not_in_gov_cloud_raises(self):
        stack = self._stack(DeploymentConfig.from_dict(make_config_dict(region=TEST_GOV_REGION, gov_cloud=True)))

        with self.assertRaises(ServiceNotFoundInPartitionException):
            stack.service(ServiceName.LOCATION)
