from cnfcyk.logging._logger import Logger
