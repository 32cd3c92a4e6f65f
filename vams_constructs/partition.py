from enum import StrEnum

from aws_cdk.region_info import RegionInfo

from vams_constructs.exceptions import UnsupportedPartitionException


class Partition(StrEnum):
    """AWS partitions, each with its own ARN and endpoint namespace."""

    AWS = 'aws'
    AWS_US_GOV = 'aws-us-gov'
    # Isolated regions, where every endpoint is FIPS-validated
    AWS_ISO = 'aws-iso'


def partition_for_region(region: str) -> Partition:
    """
    Look up the partition a region belongs to, from the CDK region fact database.

    :param region: A concrete region name, such as 'us-gov-west-1'. Unresolved tokens are not supported.
    :return: The partition for the region
    :raises UnsupportedPartitionException: If the region is unknown or its partition is not one we deploy to
    """
    partition = RegionInfo.get(region).partition if region else None
    try:
        return Partition(partition)
    except ValueError as e:
        raise UnsupportedPartitionException(region) from e
