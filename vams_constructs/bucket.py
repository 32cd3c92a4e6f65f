from aws_cdk import Stack
from aws_cdk.aws_s3 import BlockPublicAccess, BucketEncryption, ObjectOwnership
from aws_cdk.aws_s3 import Bucket as CdkBucket
from constructs import Construct

from vams_constructs.access_logs_bucket import AccessLogsBucket
from vams_constructs.security import require_tls_add_to_resource_policy


class Bucket(CdkBucket):
    """
    Standard bucket for the app: private, encrypted, and only reachable over TLS.

    :param server_access_logs_bucket: If provided, server access logs are delivered to this AccessLogsBucket, under a
    prefix unique to this bucket.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        server_access_logs_bucket: AccessLogsBucket | None = None,
        **kwargs,
    ):
        stack = Stack.of(scope)
        defaults = {'encryption': BucketEncryption.S3_MANAGED}
        defaults.update(kwargs)

        if server_access_logs_bucket is not None:
            defaults['server_access_logs_bucket'] = server_access_logs_bucket
            defaults['server_access_logs_prefix'] = (
                f'_logs/{stack.account}/{stack.region}/{scope.node.path}/{construct_id}'
            )

        super().__init__(
            scope,
            construct_id,
            block_public_access=BlockPublicAccess.BLOCK_ALL,
            object_ownership=ObjectOwnership.BUCKET_OWNER_ENFORCED,
            **defaults,
        )
        require_tls_add_to_resource_policy(self)
