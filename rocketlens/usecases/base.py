"""
UseCase 기본 클래스
모든 UseCase가 상속받는 추상 기본 클래스입니다.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from loguru import logger

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseUseCase(ABC, Generic[InputT, OutputT]):
    """
    UseCase 기본 클래스

    - 입출력 타입이 명확하게 정의됩니다.
    - 에러는 로그를 남기고 그대로 전달합니다.
    """

    name: str = "BaseUseCase"

    def __init__(self):
        self.logger = logger.bind(usecase=self.name)

    def run(self, input_data: InputT) -> OutputT:
        """
        UseCase를 실행합니다.

        Args:
            input_data: 입력 데이터

        Returns:
            출력 데이터
        """
        try:
            self._validate_input(input_data)
            result = self._process(input_data)
            self._validate_output(result)
            return result

        except Exception as e:
            self.logger.error(f"{self.name} 오류: {e}")
            raise

    @abstractmethod
    def _process(self, input_data: InputT) -> OutputT:
        """실제 처리 로직 (서브클래스에서 구현)"""
        pass

    def _validate_input(self, input_data: InputT) -> None:
        """입력 데이터 검증 (필요시 오버라이드)"""
        if input_data is None:
            raise ValueError(f"{self.name}: 입력 데이터가 None입니다.")

    def _validate_output(self, output_data: OutputT) -> None:
        """출력 데이터 검증 (필요시 오버라이드)"""
        if output_data is None:
            raise ValueError(f"{self.name}: 출력 데이터가 None입니다.")
