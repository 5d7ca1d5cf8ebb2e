"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 解析参数
PARSER_CONFIG = {
    "strict": True,  # 括号不匹配时报ParseError，而不是继续求值
    "max_expression_length": 1000,
}

# 扫描变量取值（CLI --sweep的默认范围）
SWEEP_CONFIG = {
    "default_start": -1.0,
    "default_stop": 1.0,
    "default_num_points": 50,
    "float_format": "%.10g",  # 写CSV时使用
}

# 结果显示
DISPLAY_CONFIG = {
    "precision": 10,  # 有效数字
    "imaginary_unit": "i",
    "zero_tolerance": 1e-12,  # 绝对值小于它的实部/虚部显示为0
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(PARSER_CONFIG["strict"], bool), "strict必须是bool"
    assert PARSER_CONFIG["max_expression_length"] > 0
    assert SWEEP_CONFIG["default_num_points"] >= 1
    assert SWEEP_CONFIG["default_start"] <= SWEEP_CONFIG["default_stop"]
    assert DISPLAY_CONFIG["precision"] >= 1
    assert DISPLAY_CONFIG["zero_tolerance"] >= 0
    logger.info("Configuration validated successfully!")
