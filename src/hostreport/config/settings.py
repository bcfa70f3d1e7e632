class Config:
    # Fixed report parameters; nothing here is read from the environment
    log_level = "WARNING"
    cpu_sample_interval = 1.0
    filename_prefix = "system_info_"
    filename_suffix = ".txt"
    encoding = "utf-8"

config = Config()
