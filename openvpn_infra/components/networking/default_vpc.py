"""
Default VPC lookup.

The gateway and database live in the account's default VPC, so nothing is
created here. The component resolves the VPC once at program start and
hands its id and subnets to the rest of the stack.

Not every availability zone offers every instance type (t3a is missing from
us-east-1e, for example), so the subnets the gateway may launch into are
narrowed to the zones that offer the configured instance type.

The lookup fails the program (and therefore the deployment) if the region
has no default VPC, or no default subnet sits in a zone offering the
instance type.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws


@dataclass
class VpcOutputs:
    """Output values from the default VPC lookup."""
    vpc_id: pulumi.Output[str]
    subnet_ids: pulumi.Output[list[str]]
    instance_subnet_ids: pulumi.Output[list[str]]


def offered_availability_zones(instance_type: str) -> list[str]:
    """Availability zones in the current region that offer instance_type."""
    offerings = aws.ec2.get_instance_type_offerings(
        location_type="availability-zone",
        filters=[
            aws.ec2.GetInstanceTypeOfferingsFilterArgs(
                name="instance-type",
                values=[instance_type],
            ),
        ],
    )
    return sorted(set(offerings.locations))


class DefaultVpcComponent(pulumi.ComponentResource):
    """Resolves the default VPC, its subnets, and those usable by the gateway."""

    def __init__(
        self,
        name: str,
        instance_type: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:DefaultVpc", name, None, opts)

        self.vpc = aws.ec2.get_vpc(default=True)
        vpc_filter = aws.ec2.GetSubnetsFilterArgs(
            name="vpc-id",
            values=[self.vpc.id],
        )

        # Stable ordering so the instance does not hop subnets between runs
        self.subnet_ids = sorted(aws.ec2.get_subnets(filters=[vpc_filter]).ids)

        self.availability_zones = offered_availability_zones(instance_type)
        self.instance_subnet_ids: list[str] = []
        if self.availability_zones:
            self.instance_subnet_ids = sorted(
                aws.ec2.get_subnets(
                    filters=[
                        vpc_filter,
                        aws.ec2.GetSubnetsFilterArgs(
                            name="availability-zone",
                            values=self.availability_zones,
                        ),
                    ],
                ).ids
            )

        if not self.instance_subnet_ids:
            raise pulumi.RunError(
                f"No subnet of default VPC {self.vpc.id} is in an availability zone "
                f"offering {instance_type}"
            )

        pulumi.log.debug(
            f"Default VPC {self.vpc.id} has {len(self.subnet_ids)} subnets, "
            f"{len(self.instance_subnet_ids)} in zones offering {instance_type}",
            resource=self,
        )

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "subnet_ids": self.subnet_ids,
            "instance_subnet_ids": self.instance_subnet_ids,
        })

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=pulumi.Output.from_input(self.vpc.id),
            subnet_ids=pulumi.Output.from_input(self.subnet_ids),
            instance_subnet_ids=pulumi.Output.from_input(self.instance_subnet_ids),
        )
