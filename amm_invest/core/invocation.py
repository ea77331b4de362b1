"""Fund-movement commands handed to an account's invoke()"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Invocation:
    """
    One call the account makes on our behalf.

    Attributes:
        target: Contract the account calls
        value: Native value attached, in wei
        data: ABI-encoded calldata
        operation: Short operation name used for logging and gas limits
    """

    target: str
    value: int
    data: bytes
    operation: str = "invoke"

    def __repr__(self):
        return (
            f"Invocation({self.operation} -> {self.target}, value={self.value}, "
            f"data=0x{self.data[:4].hex()}...)"
        )
