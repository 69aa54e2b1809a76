from typing import Union
from abc import ABC, abstractmethod


class HashAlgorithm(ABC):
    """用以表示可以多次输入数据（字节串），最终输出固定长度杂凑值的抽象基类。

    典型使用方式如下：
    h = HashAlgorithm()
    h.update(input_octets_1)  # 输入数据第一部分
    h.update(input_octets_2)  # 输入数据第二部分
    result = h.digest()  # 结束输入，输出杂凑值
    """

    @property
    @abstractmethod
    def block_size(self) -> int:
        """压缩函数处理的分组长度（字节数）"""
        raise NotImplementedError()

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """杂凑值长度（字节数）"""
        raise NotImplementedError()

    @abstractmethod
    def reset(self):
        """恢复到尚未输入任何数据的初始状态"""
        raise NotImplementedError()

    @abstractmethod
    def update(self, octets: Union[bytes, bytearray, memoryview]) -> int:
        """接受输入数据的函数

        :param octets: 输入字节串
        :return: 接受的字节数
        """
        raise NotImplementedError()

    @abstractmethod
    def finalize(self) -> bytes:
        """完成输入数据的函数，返回杂凑值"""
        raise NotImplementedError()

    def write(self, octets: Union[bytes, bytearray, memoryview]) -> int:
        return self.update(octets)

    def digest(self) -> bytes:
        return self.finalize()

    def hexdigest(self) -> str:
        return self.finalize().hex()

    def sum(self, octets: Union[bytes, bytearray, memoryview] = b'') -> bytes:
        """输入最后一部分数据并返回杂凑值，octets可以为空字节串"""
        if len(octets) > 0:
            self.update(octets)
        return self.finalize()
