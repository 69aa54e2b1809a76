from typing import Union

SM3_PADDING_BLOCK_BYTE_LENGTH = 64
_LENGTH_FIELD_BYTE_LENGTH = 8
_MASK_64_ONES = (0x01 << 64) - 1


class PaddingException(Exception):

    def __init__(self, *args):
        super().__init__(*args)


def sm3_pad(tail: Union[bytes, bytearray, memoryview], bit_length: int) -> bytes:
    """SM3消息填充

    GB/T 32905-2016 5.2
    在消息末尾添加比特"1"（即字节0x80），再添加若干0x00使长度模64余56，最后添加64比特的消息长度（big-endian）。
    :param tail: 尚未处理的消息尾部，长度为0~63字节
    :param bit_length: 消息的总长度（比特数）
    :return: 填充后的最后一个或两个分组
    """
    tail_byte_len = len(tail)
    if tail_byte_len >= SM3_PADDING_BLOCK_BYTE_LENGTH:
        raise PaddingException(f'待填充数据长度{tail_byte_len}不小于分组长度'
                               f'/Length {tail_byte_len} of data to pad is not less than block size')
    if bit_length < 0:
        raise PaddingException(f'消息长度{bit_length}为负数/Message length {bit_length} is negative')

    result = bytearray(tail)
    result.append(0x80)
    k = (tail_byte_len + 1 + _LENGTH_FIELD_BYTE_LENGTH) % SM3_PADDING_BLOCK_BYTE_LENGTH  # 加0x80和8字节长度以后最后分组的字节数
    if k > 0:
        result.extend(b'\x00' * (SM3_PADDING_BLOCK_BYTE_LENGTH - k))
    result.extend((bit_length & _MASK_64_ONES).to_bytes(_LENGTH_FIELD_BYTE_LENGTH, byteorder='big', signed=False))

    assert len(result) % SM3_PADDING_BLOCK_BYTE_LENGTH == 0
    return bytes(result)
