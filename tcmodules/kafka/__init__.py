"""Kafka broker images: Apache Kafka in KRaft mode and Confluent Kafka with ZooKeeper."""