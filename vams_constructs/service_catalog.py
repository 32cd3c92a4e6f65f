from dataclasses import dataclass
from enum import StrEnum

from vams_constructs.partition import Partition

REGION = '{region}'
ACCOUNT_ID = '{account-id}'
RESOURCE_ID = '{resource-id}'

# Substitution order is fixed
PLACEHOLDERS = (REGION, ACCOUNT_ID, RESOURCE_ID)


class ServiceName(StrEnum):
    """Abstract names for the AWS services the app declares resources against."""

    API_GATEWAY = 'API_GATEWAY'
    BATCH = 'BATCH'
    CLOUDFRONT = 'CLOUDFRONT'
    COGNITO_IDENTITY = 'COGNITO_IDENTITY'
    COGNITO_IDP = 'COGNITO_IDP'
    DYNAMODB = 'DYNAMODB'
    ECR = 'ECR'
    ECS_TASKS = 'ECS_TASKS'
    EVENTS = 'EVENTS'
    KMS = 'KMS'
    LAMBDA = 'LAMBDA'
    LOCATION = 'LOCATION'
    LOGS = 'LOGS'
    OPENSEARCH = 'OPENSEARCH'
    S3 = 'S3'
    SAGEMAKER = 'SAGEMAKER'
    SECRETS_MANAGER = 'SECRETS_MANAGER'
    SNS = 'SNS'
    SQS = 'SQS'
    SSM = 'SSM'
    STEP_FUNCTIONS = 'STEP_FUNCTIONS'
    STS = 'STS'


@dataclass(frozen=True)
class ServiceDefinition:
    """
    Address templates for one service in one partition.

    :param arn: ARN template, usually ending in a resource-id placeholder
    :param hostname: Standard endpoint hostname template
    :param fips_hostname: FIPS endpoint hostname template
    :param principal: Service principal template, for trust policies
    """

    arn: str
    hostname: str
    fips_hostname: str
    principal: str


SERVICE_LOOKUP: dict[ServiceName, dict[Partition, ServiceDefinition]] = {
    ServiceName.API_GATEWAY: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:apigateway:{region}::{resource-id}',
            hostname='apigateway.{region}.amazonaws.com',
            fips_hostname='apigateway-fips.{region}.amazonaws.com',
            principal='apigateway.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:apigateway:{region}::{resource-id}',
            hostname='apigateway.{region}.amazonaws.com',
            fips_hostname='apigateway-fips.{region}.amazonaws.com',
            principal='apigateway.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:apigateway:{region}::{resource-id}',
            hostname='apigateway.{region}.c2s.ic.gov',
            fips_hostname='apigateway.{region}.c2s.ic.gov',
            principal='apigateway.amazonaws.com',
        ),
    },
    ServiceName.BATCH: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:batch:{region}:{account-id}:job-queue/{resource-id}',
            hostname='batch.{region}.amazonaws.com',
            fips_hostname='fips.batch.{region}.amazonaws.com',
            principal='batch.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:batch:{region}:{account-id}:job-queue/{resource-id}',
            hostname='batch.{region}.amazonaws.com',
            fips_hostname='batch.{region}.amazonaws.com',
            principal='batch.amazonaws.com',
        ),
    },
    # Commercial partition only
    ServiceName.CLOUDFRONT: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:cloudfront::{account-id}:distribution/{resource-id}',
            hostname='cloudfront.amazonaws.com',
            fips_hostname='cloudfront-fips.amazonaws.com',
            principal='cloudfront.amazonaws.com',
        ),
    },
    ServiceName.COGNITO_IDENTITY: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:cognito-identity:{region}:{account-id}:identitypool/{resource-id}',
            hostname='cognito-identity.{region}.amazonaws.com',
            fips_hostname='cognito-identity-fips.{region}.amazonaws.com',
            principal='cognito-identity.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:cognito-identity:{region}:{account-id}:identitypool/{resource-id}',
            hostname='cognito-identity.{region}.amazonaws.com',
            fips_hostname='cognito-identity-fips.{region}.amazonaws.com',
            principal='cognito-identity-us-gov.amazonaws.com',
        ),
    },
    ServiceName.COGNITO_IDP: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:cognito-idp:{region}:{account-id}:userpool/{resource-id}',
            hostname='cognito-idp.{region}.amazonaws.com',
            fips_hostname='cognito-idp-fips.{region}.amazonaws.com',
            principal='cognito-idp.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:cognito-idp:{region}:{account-id}:userpool/{resource-id}',
            hostname='cognito-idp.{region}.amazonaws.com',
            fips_hostname='cognito-idp-fips.{region}.amazonaws.com',
            principal='cognito-idp.amazonaws.com',
        ),
    },
    ServiceName.DYNAMODB: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:dynamodb:{region}:{account-id}:table/{resource-id}',
            hostname='dynamodb.{region}.amazonaws.com',
            fips_hostname='dynamodb-fips.{region}.amazonaws.com',
            principal='dynamodb.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:dynamodb:{region}:{account-id}:table/{resource-id}',
            hostname='dynamodb.{region}.amazonaws.com',
            fips_hostname='dynamodb.{region}.amazonaws.com',
            principal='dynamodb.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:dynamodb:{region}:{account-id}:table/{resource-id}',
            hostname='dynamodb.{region}.c2s.ic.gov',
            fips_hostname='dynamodb.{region}.c2s.ic.gov',
            principal='dynamodb.amazonaws.com',
        ),
    },
    ServiceName.ECR: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:ecr:{region}:{account-id}:repository/{resource-id}',
            hostname='api.ecr.{region}.amazonaws.com',
            fips_hostname='ecr-fips.{region}.amazonaws.com',
            principal='ecr.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:ecr:{region}:{account-id}:repository/{resource-id}',
            hostname='api.ecr.{region}.amazonaws.com',
            fips_hostname='ecr-fips.{region}.amazonaws.com',
            principal='ecr.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:ecr:{region}:{account-id}:repository/{resource-id}',
            hostname='api.ecr.{region}.c2s.ic.gov',
            fips_hostname='api.ecr.{region}.c2s.ic.gov',
            principal='ecr.amazonaws.com',
        ),
    },
    ServiceName.ECS_TASKS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:ecs:{region}:{account-id}:task-definition/{resource-id}',
            hostname='ecs.{region}.amazonaws.com',
            fips_hostname='ecs-fips.{region}.amazonaws.com',
            principal='ecs-tasks.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:ecs:{region}:{account-id}:task-definition/{resource-id}',
            hostname='ecs.{region}.amazonaws.com',
            fips_hostname='ecs-fips.{region}.amazonaws.com',
            principal='ecs-tasks.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:ecs:{region}:{account-id}:task-definition/{resource-id}',
            hostname='ecs.{region}.c2s.ic.gov',
            fips_hostname='ecs.{region}.c2s.ic.gov',
            principal='ecs-tasks.amazonaws.com',
        ),
    },
    ServiceName.EVENTS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:events:{region}:{account-id}:rule/{resource-id}',
            hostname='events.{region}.amazonaws.com',
            fips_hostname='events-fips.{region}.amazonaws.com',
            principal='events.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:events:{region}:{account-id}:rule/{resource-id}',
            hostname='events.{region}.amazonaws.com',
            fips_hostname='events.{region}.amazonaws.com',
            principal='events.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:events:{region}:{account-id}:rule/{resource-id}',
            hostname='events.{region}.c2s.ic.gov',
            fips_hostname='events.{region}.c2s.ic.gov',
            principal='events.amazonaws.com',
        ),
    },
    ServiceName.KMS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:kms:{region}:{account-id}:key/{resource-id}',
            hostname='kms.{region}.amazonaws.com',
            fips_hostname='kms-fips.{region}.amazonaws.com',
            principal='kms.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:kms:{region}:{account-id}:key/{resource-id}',
            hostname='kms.{region}.amazonaws.com',
            fips_hostname='kms-fips.{region}.amazonaws.com',
            principal='kms.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:kms:{region}:{account-id}:key/{resource-id}',
            hostname='kms.{region}.c2s.ic.gov',
            fips_hostname='kms.{region}.c2s.ic.gov',
            principal='kms.amazonaws.com',
        ),
    },
    ServiceName.LAMBDA: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:lambda:{region}:{account-id}:function:{resource-id}',
            hostname='lambda.{region}.amazonaws.com',
            fips_hostname='lambda-fips.{region}.amazonaws.com',
            principal='lambda.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:lambda:{region}:{account-id}:function:{resource-id}',
            hostname='lambda.{region}.amazonaws.com',
            fips_hostname='lambda-fips.{region}.amazonaws.com',
            principal='lambda.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:lambda:{region}:{account-id}:function:{resource-id}',
            hostname='lambda.{region}.c2s.ic.gov',
            fips_hostname='lambda.{region}.c2s.ic.gov',
            principal='lambda.amazonaws.com',
        ),
    },
    # Commercial partition only
    ServiceName.LOCATION: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:geo:{region}:{account-id}:map/{resource-id}',
            hostname='geo.{region}.amazonaws.com',
            fips_hostname='geo-fips.{region}.amazonaws.com',
            principal='geo.amazonaws.com',
        ),
    },
    ServiceName.LOGS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:logs:{region}:{account-id}:log-group:{resource-id}',
            hostname='logs.{region}.amazonaws.com',
            fips_hostname='logs-fips.{region}.amazonaws.com',
            principal='logs.{region}.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:logs:{region}:{account-id}:log-group:{resource-id}',
            hostname='logs.{region}.amazonaws.com',
            fips_hostname='logs.{region}.amazonaws.com',
            principal='logs.{region}.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:logs:{region}:{account-id}:log-group:{resource-id}',
            hostname='logs.{region}.c2s.ic.gov',
            fips_hostname='logs.{region}.c2s.ic.gov',
            principal='logs.{region}.amazonaws.com',
        ),
    },
    ServiceName.OPENSEARCH: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:es:{region}:{account-id}:domain/{resource-id}',
            hostname='es.{region}.amazonaws.com',
            fips_hostname='es-fips.{region}.amazonaws.com',
            principal='es.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:es:{region}:{account-id}:domain/{resource-id}',
            hostname='es.{region}.amazonaws.com',
            fips_hostname='es-fips.{region}.amazonaws.com',
            principal='es.amazonaws.com',
        ),
    },
    ServiceName.S3: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:s3:::{resource-id}',
            hostname='s3.{region}.amazonaws.com',
            fips_hostname='s3-fips.{region}.amazonaws.com',
            principal='s3.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:s3:::{resource-id}',
            hostname='s3.{region}.amazonaws.com',
            fips_hostname='s3-fips.{region}.amazonaws.com',
            principal='s3.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:s3:::{resource-id}',
            hostname='s3.{region}.c2s.ic.gov',
            fips_hostname='s3.{region}.c2s.ic.gov',
            principal='s3.amazonaws.com',
        ),
    },
    ServiceName.SAGEMAKER: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:sagemaker:{region}:{account-id}:{resource-id}',
            hostname='api.sagemaker.{region}.amazonaws.com',
            fips_hostname='api-fips.sagemaker.{region}.amazonaws.com',
            principal='sagemaker.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:sagemaker:{region}:{account-id}:{resource-id}',
            hostname='api.sagemaker.{region}.amazonaws.com',
            fips_hostname='api-fips.sagemaker.{region}.amazonaws.com',
            principal='sagemaker.amazonaws.com',
        ),
    },
    ServiceName.SECRETS_MANAGER: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:secretsmanager:{region}:{account-id}:secret:{resource-id}',
            hostname='secretsmanager.{region}.amazonaws.com',
            fips_hostname='secretsmanager-fips.{region}.amazonaws.com',
            principal='secretsmanager.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:secretsmanager:{region}:{account-id}:secret:{resource-id}',
            hostname='secretsmanager.{region}.amazonaws.com',
            fips_hostname='secretsmanager-fips.{region}.amazonaws.com',
            principal='secretsmanager.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:secretsmanager:{region}:{account-id}:secret:{resource-id}',
            hostname='secretsmanager.{region}.c2s.ic.gov',
            fips_hostname='secretsmanager.{region}.c2s.ic.gov',
            principal='secretsmanager.amazonaws.com',
        ),
    },
    ServiceName.SNS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:sns:{region}:{account-id}:{resource-id}',
            hostname='sns.{region}.amazonaws.com',
            fips_hostname='sns-fips.{region}.amazonaws.com',
            principal='sns.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:sns:{region}:{account-id}:{resource-id}',
            hostname='sns.{region}.amazonaws.com',
            fips_hostname='sns.{region}.amazonaws.com',
            principal='sns.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:sns:{region}:{account-id}:{resource-id}',
            hostname='sns.{region}.c2s.ic.gov',
            fips_hostname='sns.{region}.c2s.ic.gov',
            principal='sns.amazonaws.com',
        ),
    },
    ServiceName.SQS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:sqs:{region}:{account-id}:{resource-id}',
            hostname='sqs.{region}.amazonaws.com',
            fips_hostname='sqs-fips.{region}.amazonaws.com',
            principal='sqs.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:sqs:{region}:{account-id}:{resource-id}',
            hostname='sqs.{region}.amazonaws.com',
            fips_hostname='sqs.{region}.amazonaws.com',
            principal='sqs.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:sqs:{region}:{account-id}:{resource-id}',
            hostname='sqs.{region}.c2s.ic.gov',
            fips_hostname='sqs.{region}.c2s.ic.gov',
            principal='sqs.amazonaws.com',
        ),
    },
    ServiceName.SSM: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:ssm:{region}:{account-id}:parameter/{resource-id}',
            hostname='ssm.{region}.amazonaws.com',
            fips_hostname='ssm-fips.{region}.amazonaws.com',
            principal='ssm.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:ssm:{region}:{account-id}:parameter/{resource-id}',
            hostname='ssm.{region}.amazonaws.com',
            fips_hostname='ssm.{region}.amazonaws.com',
            principal='ssm.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:ssm:{region}:{account-id}:parameter/{resource-id}',
            hostname='ssm.{region}.c2s.ic.gov',
            fips_hostname='ssm.{region}.c2s.ic.gov',
            principal='ssm.amazonaws.com',
        ),
    },
    ServiceName.STEP_FUNCTIONS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:states:{region}:{account-id}:stateMachine:{resource-id}',
            hostname='states.{region}.amazonaws.com',
            fips_hostname='states-fips.{region}.amazonaws.com',
            principal='states.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:states:{region}:{account-id}:stateMachine:{resource-id}',
            hostname='states.{region}.amazonaws.com',
            fips_hostname='states-fips.{region}.amazonaws.com',
            principal='states.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:states:{region}:{account-id}:stateMachine:{resource-id}',
            hostname='states.{region}.c2s.ic.gov',
            fips_hostname='states.{region}.c2s.ic.gov',
            principal='states.amazonaws.com',
        ),
    },
    ServiceName.STS: {
        Partition.AWS: ServiceDefinition(
            arn='arn:aws:sts::{account-id}:{resource-id}',
            hostname='sts.{region}.amazonaws.com',
            fips_hostname='sts-fips.{region}.amazonaws.com',
            principal='sts.amazonaws.com',
        ),
        Partition.AWS_US_GOV: ServiceDefinition(
            arn='arn:aws-us-gov:sts::{account-id}:{resource-id}',
            hostname='sts.{region}.amazonaws.com',
            fips_hostname='sts.{region}.amazonaws.com',
            principal='sts.amazonaws.com',
        ),
        Partition.AWS_ISO: ServiceDefinition(
            arn='arn:aws-iso:sts::{account-id}:{resource-id}',
            hostname='sts.{region}.c2s.ic.gov',
            fips_hostname='sts.{region}.c2s.ic.gov',
            principal='sts.amazonaws.com',
        ),
    },
}
