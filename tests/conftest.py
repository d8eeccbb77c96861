import os
import tempfile

# 测试期间的会话日志写入临时目录
os.environ.setdefault("ASSETLINT_HOME", tempfile.mkdtemp(prefix="assetlint-home-"))
