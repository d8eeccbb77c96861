"""AssetLint Lint 核心模块

主要组件:
- config: 设置加载（YAML）
- asset_store: 资源查询（Unity 工程目录）
- rule_engine: 命名规则解析、判定与建议名生成
- reporter: 违规记录与输出
- violation_logger: 违规日志导出（文本 / CSV）
- renamer: 批量重命名
"""
