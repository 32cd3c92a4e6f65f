from unittest import TestCase

from vams_constructs.partition import Partition
from vams_constructs.service_catalog import PLACEHOLDERS, SERVICE_LOOKUP, ServiceDefinition, ServiceName

COMMERCIAL_ONLY = {ServiceName.CLOUDFRONT, ServiceName.LOCATION}


class TestServiceCatalog(TestCase):
    def test_every_service_has_a_catalog_entry(self):
        self.assertEqual(set(ServiceName), set(SERVICE_LOOKUP.keys()))

    def test_every_service_is_defined_in_the_commercial_partition(self):
        for name, rows in SERVICE_LOOKUP.items():
            with self.subTest(service=name):
                self.assertIn(Partition.AWS, rows)

    def test_gov_cloud_coverage(self):
        for name, rows in SERVICE_LOOKUP.items():
            with self.subTest(service=name):
                if name in COMMERCIAL_ONLY:
                    self.assertNotIn(Partition.AWS_US_GOV, rows)
                else:
                    self.assertIn(Partition.AWS_US_GOV, rows)

    def test_arn_templates_are_in_their_partition(self):
        for name, rows in SERVICE_LOOKUP.items():
            for partition, definition in rows.items():
                with self.subTest(service=name, partition=partition):
                    self.assertIsInstance(definition, ServiceDefinition)
                    self.assertTrue(definition.arn.startswith(f'arn:{partition.value}:'))

    def test_isolated_hostnames_are_fips_only(self):
        for name, rows in SERVICE_LOOKUP.items():
            definition = rows.get(Partition.AWS_ISO)
            if definition is None:
                continue
            with self.subTest(service=name):
                self.assertTrue(definition.hostname.endswith('.c2s.ic.gov'))
                self.assertEqual(definition.hostname, definition.fips_hostname)

    def test_templates_only_use_known_placeholders(self):
        for name, rows in SERVICE_LOOKUP.items():
            for partition, definition in rows.items():
                for template in (definition.arn, definition.hostname, definition.fips_hostname, definition.principal):
                    with self.subTest(service=name, partition=partition, template=template):
                        stripped = template
                        for placeholder in PLACEHOLDERS:
                            stripped = stripped.replace(placeholder, '')
                        self.assertNotIn('{', stripped)
                        self.assertNotIn('}', stripped)

    def test_lookup_by_plain_strings(self):
        """Service and partition names from configuration files can be used as keys directly."""
        self.assertIs(SERVICE_LOOKUP[ServiceName.S3][Partition.AWS_US_GOV], SERVICE_LOOKUP['S3']['aws-us-gov'])
