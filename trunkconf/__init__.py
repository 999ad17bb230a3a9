"""
Trunk 配置解析 - 前端构建工具的分层配置引擎

模块结构：
- models/     配置选项、运行期配置等数据模型
- config/     文件/环境变量/命令行三层加载、合并与解析
- interfaces  配置层接口与异常定义
- cli         命令行入口
"""

__version__ = "0.1.0"
