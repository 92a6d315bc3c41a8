import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

COMMON_LAYER_PATH = "layers/common_layer"

# 先頭から順に試す（uv が無い環境では pip）
_INSTALLERS: list[tuple[str, list[str]]] = [
    ("uv", ["uv", "pip", "install", "-r", "{requirements}", "--target", "{target}"]),
    ("pip", ["pip", "install", "-r", "{requirements}", "-t", "{target}"]),
]


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """Docker を使わずに依存ライブラリを Layer 用ディレクトリへ展開する"""

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでのバンドリングを試行する。

        Args:
            output_dir: Layer アセットの出力先
            options: BundlingOptions（ILocalBundling の必須引数）

        Returns:
            成功時 True。False の場合 CDK は Docker でのバンドリングに切り替える。
        """
        del options
        requirements_path = Path(self.source_path) / "requirements.txt"
        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        target_dir = Path(output_dir) / "python"
        for name, template in _INSTALLERS:
            command = [
                arg.format(requirements=requirements_path, target=target_dir)
                for arg in template
            ]
            if self._install(name, command + ["--quiet"]):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def _install(self, name: str, command: list[str]) -> bool:
        try:
            logger.info("Trying local bundling with %s...", name)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", name)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", name, e)
            return False
        logger.info("Local bundling with %s succeeded", name)
        return True


class Layers(Construct):
    """Lambda Layers Construct

    powertools と pydantic をまとめた共通 Layer を提供する。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                COMMON_LAYER_PATH,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(COMMON_LAYER_PATH),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_12],
            description="Booking service shared dependencies",
        )
