class EpubError(Exception):
    """epub_writer 抛出的所有错误的基类"""


class InvalidArgumentError(EpubError, ValueError):
    """调用方传入的值不可接受，例如不支持的图片类型"""


class InvalidStateError(EpubError, RuntimeError):
    """当前状态下该操作没有定义，例如 finalize 之后继续写入"""


class ResourceError(EpubError, OSError):
    """无法打开或写入输出目标"""
