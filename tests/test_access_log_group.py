from unittest import TestCase

from aws_cdk import App
from aws_cdk.assertions import Template
from aws_cdk.aws_logs import CfnLogGroup

from vams_constructs.access_log_group import ApiAccessLogGroup, api_access_log_group_name
from vams_constructs.config import DeploymentConfig
from vams_constructs.stack import Stack, StandardTags
from tests.test_context import make_config_dict


class TestApiAccessLogGroup(TestCase):
    def test_name_is_stable(self):
        config = DeploymentConfig.from_dict(make_config_dict())

        self.assertEqual('/aws/vendedlogs/VAMS-API-AccessLogsaf6b7c9e25', api_access_log_group_name(config))

    def test_log_group(self):
        config = DeploymentConfig.from_dict(make_config_dict())
        app = App()
        stack = Stack(
            app,
            'Stack',
            standard_tags=StandardTags(project='vams', service='test-service', environment='test'),
            deployment_config=config,
        )
        log_group = ApiAccessLogGroup(stack, 'AccessLogs', deployment_config=config)

        template = Template.from_stack(stack)

        template.has_resource(
            type=CfnLogGroup.CFN_RESOURCE_TYPE_NAME,
            props={
                'Properties': {
                    'LogGroupName': '/aws/vendedlogs/VAMS-API-AccessLogsaf6b7c9e25',
                    'RetentionInDays': 731,
                },
                'DeletionPolicy': 'Delete',
            },
        )
        self.assertEqual(
            stack.get_logical_id(log_group.node.default_child),
            list(template.find_resources(CfnLogGroup.CFN_RESOURCE_TYPE_NAME).keys())[0],
        )
