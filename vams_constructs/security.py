import hashlib

from aws_cdk.aws_iam import AddToResourcePolicyResult, AnyPrincipal, Effect, PolicyStatement
from aws_cdk.aws_s3 import IBucket
from cdk_nag import NagPackSuppression, NagSuppressions, RegexAppliesTo
from constructs import Construct


def require_tls_statement(bucket_arn: str) -> PolicyStatement:
    """
    Deny any S3 action on a bucket, or its objects, over a connection that isn't encrypted.

    Equivalent to the policy in
    https://aws.amazon.com/premiumsupport/knowledge-center/s3-bucket-policy-for-config-rule/

    :param bucket_arn: ARN of the bucket the statement applies to
    """
    return PolicyStatement(
        effect=Effect.DENY,
        principals=[AnyPrincipal()],
        actions=['s3:*'],
        resources=[bucket_arn, f'{bucket_arn}/*'],
        conditions={
            'Bool': {'aws:SecureTransport': 'false'},
        },
    )


def require_tls_add_to_resource_policy(bucket: IBucket) -> AddToResourcePolicyResult:
    """
    Every bucket the app declares must be passed through this before it is complete.
    """
    return bucket.add_to_resource_policy(require_tls_statement(bucket.bucket_arn))


def generate_unique_name_hash(
    stack_name: str, account_id: str, resource_identifier: str, max_length: int = 32
) -> str:
    """
    Short, reproducible suffix for resources whose names must be unique but stable across deployments.

    SHA-1 is used only to shorten the inputs into a name, not as a security control. The inputs are joined without
    a delimiter, which existing resource names depend on.

    :param stack_name: Name of the stack the resource belongs to
    :param account_id: Account the resource is deployed to
    :param resource_identifier: Identifies the resource within the stack
    :param max_length: Maximum length of the returned suffix
    :return: Lowercase hex digest, truncated to max_length
    """
    digest = hashlib.sha1(f'{stack_name}{account_id}{resource_identifier}'.encode(), usedforsecurity=False)
    return digest.hexdigest().lower()[: max(max_length, 0)]


def suppress_cdk_nag_errors_by_grant_read_write(scope: Construct):
    reason = 'This lambda owns the data in this bucket and should have full access to control its assets.'
    NagSuppressions.add_resource_suppressions(
        scope,
        suppressions=[
            NagPackSuppression(
                id='AwsSolutions-IAM5',
                reason=reason,
                applies_to=[RegexAppliesTo(regex='/Action::s3:.*/g')],
            ),
            NagPackSuppression(
                id='AwsSolutions-IAM5',
                reason=reason,
                # https://github.com/cdklabs/cdk-nag#suppressing-a-rule
                applies_to=[RegexAppliesTo(regex='/^Resource::.*/g')],
            ),
        ],
        apply_to_children=True,
    )
