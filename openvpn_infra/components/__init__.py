"""
Pulumi component resources for the OpenVPN gateway stack.

Each submodule provides ComponentResource classes:
- networking: default VPC lookup, security groups
- security: IAM role, SSH key pair
- compute: OpenVPN gateway EC2 instance
- storage: RDS MySQL
"""
