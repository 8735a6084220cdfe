from cnfcyk.concepts._abstractexception import AbstractException
