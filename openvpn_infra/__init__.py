"""
Pulumi infrastructure-as-code for the OpenVPN gateway.

This package defines AWS infrastructure including:
- Lookup of the account's default VPC
- Security groups for the VPN gateway and the database
- IAM role and SSH key pair for the gateway instance
- EC2 instance running the OpenVPN Access Server host (Ubuntu 22.04)
- RDS MySQL instance with AWS-managed credentials
"""
