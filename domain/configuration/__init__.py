"""配置领域模块"""
