"""收件箱领域模块

该模块包含收件箱刷新所需的领域模型，包括：
- MailEntry / Mail / Sender 值对象
- InboxMailDbManager 收件箱表管理接口
- MailManager 邮件传输服务接口
"""
