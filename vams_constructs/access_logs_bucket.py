from aws_cdk import CustomResourceProvider, RemovalPolicy, Stack
from aws_cdk.aws_iam import Effect, PolicyStatement, StarPrincipal
from aws_cdk.aws_s3 import BlockPublicAccess, BucketAccessControl, BucketEncryption, ObjectOwnership
from aws_cdk.aws_s3 import Bucket as CdkBucket
from cdk_nag import NagSuppressions
from constructs import Construct

from vams_constructs.security import require_tls_add_to_resource_policy


class AccessLogsBucket(CdkBucket):
    """
    Destination for other buckets' server access logs.

    Log delivery writes through the LogDeliveryWrite ACL, so unlike the standard bucket, this one has to allow ACLs.
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs):
        stack = Stack.of(scope)

        super().__init__(
            scope,
            construct_id,
            block_public_access=BlockPublicAccess.BLOCK_ALL,
            encryption=BucketEncryption.S3_MANAGED,
            object_ownership=ObjectOwnership.BUCKET_OWNER_PREFERRED,
            access_control=BucketAccessControl.LOG_DELIVERY_WRITE,
            versioned=True,
            **kwargs,
        )
        require_tls_add_to_resource_policy(self)

        auto_delete_provider: CustomResourceProvider = stack.node.try_find_child(
            'Custom::S3AutoDeleteObjectsCustomResourceProvider'
        )
        if (
            auto_delete_provider is not None
            and kwargs.get('removal_policy') == RemovalPolicy.DESTROY
            and kwargs.get('auto_delete_objects', False)
        ):
            # Except for the auto delete provider role
            delete_conditions = {'conditions': {'ArnNotEquals': {'aws:PrincipalArn': auto_delete_provider.role_arn}}}
        else:
            delete_conditions = {}

        # Logs are an audit trail, so nobody deletes them
        self.add_to_resource_policy(
            PolicyStatement(
                effect=Effect.DENY,
                resources=[self.arn_for_objects('*')],
                actions=['s3:DeleteObject'],
                principals=[StarPrincipal()],
                **delete_conditions,
            )
        )

        NagSuppressions.add_resource_suppressions(
            self,
            suppressions=[
                {
                    'id': 'AwsSolutions-S1',
                    'reason': 'This is the access logging bucket',
                },
            ],
        )
