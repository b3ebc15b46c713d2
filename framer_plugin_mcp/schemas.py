"""Request models for the plugin tools."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Web3Feature = Literal["wallet-connect", "contract-interaction", "nft-display"]

WEB3_FEATURES: List[str] = ["wallet-connect", "contract-interaction", "nft-display"]


class CreatePluginRequest(BaseModel):
    """Arguments of the create_plugin tool."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    output_path: str = Field(alias="outputPath")
    web3_features: Optional[List[Web3Feature]] = Field(default=None, alias="web3Features")

    @property
    def wallet_connect(self) -> bool:
        return "wallet-connect" in (self.web3_features or [])


class BuildPluginRequest(BaseModel):
    """Arguments of the build_plugin tool."""

    model_config = ConfigDict(populate_by_name=True)

    plugin_path: str = Field(alias="pluginPath")
