from typing import Union, List, Sequence, Optional

MASK_32_ONES = (0x01 << 32) - 1


def rls_32(x: int, n: int) -> int:
    """32位循环左移

    移位位数按模32处理，n为0或32的倍数时结果不变
    """
    n %= 32
    x &= MASK_32_ONES
    return ((x << n) | (x >> (32 - n))) & MASK_32_ONES


def mod_add_32(a: int, b: int) -> int:
    """模2^32加法"""
    return (a + b) & MASK_32_ONES


def mod_adds_32(*args) -> int:
    """模2^32连加"""
    res = 0
    for arg in args:
        res = mod_add_32(res, arg)
    return res


def bytes_to_words_32(octets: Union[bytes, bytearray, memoryview], out: Optional[List[int]] = None) -> List[int]:
    """字节串按big-endian转化为32位无符号整数列表

    :param octets: 输入字节串，长度应当为4的倍数
    :param out: 可选的输出列表，用于复用已分配的空间，长度不小于len(octets) // 4
    :return: 32位无符号整数列表
    """
    if len(octets) % 4 != 0:
        raise ValueError(f'字节串长度{len(octets)}不是4的倍数/Length {len(octets)} is not a multiple of 4')
    if out is None:
        out = [0] * (len(octets) // 4)
    j, m, n = 0, 0, 4
    while m < len(octets):
        out[j] = int.from_bytes(octets[m:n], byteorder='big', signed=False)
        j += 1
        m = n
        n = m + 4
    return out


def words_32_to_bytes(words: Sequence[int]) -> bytes:
    """32位无符号整数序列按big-endian转化为字节串"""
    result = bytearray()
    for n in words:
        result.extend(n.to_bytes(4, byteorder='big', signed=False))
    return bytes(result)
