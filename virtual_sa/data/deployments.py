"""
Deployment configurations for the ROI simulator cost model
"""
from ..models.domain import DeploymentConfig, DeploymentMode


DEPLOYMENT_CONFIGS = {
    DeploymentMode.CLOUD_API: DeploymentConfig(
        mode=DeploymentMode.CLOUD_API,
        label="Cloud API",
        description="Hosted NIM endpoints billed per token. No GPUs to provision.",
        capex_per_gpu=0,
        opex_per_gpu_per_month=0,
        gpus_required=0,
        enterprise_license_per_gpu_per_year=0,
        self_hosted=False,
        data_residency=False,
    ),
    DeploymentMode.CLOUD_GPU: DeploymentConfig(
        mode=DeploymentMode.CLOUD_GPU,
        label="Cloud GPU Rental",
        description="Self-hosted NIM containers on rented H100 instances inside your VPC.",
        capex_per_gpu=0,
        opex_per_gpu_per_month=2500,
        gpus_required=4,
        enterprise_license_per_gpu_per_year=4500,
        self_hosted=True,
        data_residency=True,
    ),
    DeploymentMode.ON_PREM: DeploymentConfig(
        mode=DeploymentMode.ON_PREM,
        label="On-Prem DGX",
        description="Purchased H100 GPUs in your data center. Power and cooling billed as OpEx.",
        capex_per_gpu=35000,
        opex_per_gpu_per_month=400,
        gpus_required=4,
        enterprise_license_per_gpu_per_year=4500,
        self_hosted=True,
        data_residency=True,
    ),
}
