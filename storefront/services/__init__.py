# Services Module
